"""contrast_checker.core — Foundation layer.

Contains the contrast evaluator, colour adapters, palette, type definitions,
theme parser, and report builder.
This module has NO dependencies on contrast_checker.checks or contrast_checker.registry.
Only stdlib and numpy are allowed here.
"""
