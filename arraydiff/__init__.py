"""
ArrayDiff: compare any number of value lists pairwise.

Components:
    - arraydiff.engine: parsing of free-form list text and pairwise comparison
    - arraydiff.session: editable set of lists with all-or-nothing evaluation
    - arraydiff.report: text and JSON rendering of comparison results
    - arraydiff.main: command line interface
    - arraydiff.tui: Textual terminal UI
"""

__version__ = "0.1.0"
