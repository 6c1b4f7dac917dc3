"""
ArrayDiff terminal UI.

A Textual-based terminal UI for editing any number of lists and viewing
their pairwise comparison as you type.

Usage:
    python -m arraydiff.tui.app "1, 2, 3" "[2, 3, 4]"

Components:
    - ArrayDiffApp: Main application class
    - ListEditor: Name and values editor for one list
    - ResultsPanel: Comparison report view
"""
