"""
Text exporters for circuit documents: CircuiTikZ code and markup records.

No Qt dependencies.
"""
