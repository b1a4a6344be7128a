"""Use-case layer: one callable per committed user action.

Each use case mutates the ``LayoutState`` it is handed and records a history
checkpoint through a ``HistoryPort`` when the action commits. Use cases never
render or perform I/O.
"""
