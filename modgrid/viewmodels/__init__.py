"""ViewModel package for UI state and command surfaces.

Call context:
    A UI layer (any toolkit) creates one ``LayoutController`` and binds its
    widgets to the view models in this package.

Dependencies:
    Modules in this package depend on the controller and domain types only.
    Rendering and clipboard access stay in the view, reached via callbacks.

Responsibilities:
    - Expose UI-only state (viewport, drag source, active code tab).
    - Transform layout state into view-facing DTOs.
    - Report outcomes through ``on_toast`` instead of raising.
"""
