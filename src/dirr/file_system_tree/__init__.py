"""Directory traversal and tree rendering.

This package builds tree representations of directory structures, with support
for excluding directories by name or pattern, and renders them as ASCII trees.
"""
