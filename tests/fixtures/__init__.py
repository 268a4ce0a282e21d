"""Test fixtures for the virtual file system.

This package provides reusable test fixtures:
- filesystem: VirtualFileSystem factories and pre-built project trees
- tools: Editor and file manager tools bound to those trees
"""
