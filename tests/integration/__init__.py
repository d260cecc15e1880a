"""
Integration tests for xml-node-search.

These tests run the command-line front end against real files on disk.
"""
