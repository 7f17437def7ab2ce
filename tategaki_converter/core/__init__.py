"""Core segmentation, transposition, and intermediate representation.

WHY: The core package is the heart of the converter: deciding where a
sentence breaks into lines and how those lines become vertical columns.
Formatters, the CLI, and library callers all build on it.

HOW: ir.py defines the data structures, segmenter.py splits sentences
into lines, transposer.py turns lines into the vertical block, and
converter.py runs the two in sequence. errors.py holds the exception
hierarchy.

RULES:
- IR dataclasses are the contract; change with care
- The core never performs I/O; the tokenizer is the only collaborator
- No module-level mutable state; settings travel in VerticalOptions
"""
