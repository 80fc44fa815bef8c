"""Recall build pipeline.

This module reads raw agency source files and runs them through
normalization, classification, identity, and aggregation transforms.
It hands finished store contents to the store layer.
"""
