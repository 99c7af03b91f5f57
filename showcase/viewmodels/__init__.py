"""ViewModel package for screen state and interaction handlers.

Call context:
    ``showcase/app/controller.py`` builds concrete viewmodels from this
    package and hands them to whatever renders the screens.

Dependencies:
    Modules in this package depend on domain types, the ``Dispatcher`` port
    and lightweight formatting helpers only. HTTP stays in adapters.

Responsibilities:
    - Hold fetched collections and their fetch status (``RemoteSlot``).
    - Expose derived views recomputed from held data and the active filter.
    - Apply user interactions as explicit state transitions.
"""
