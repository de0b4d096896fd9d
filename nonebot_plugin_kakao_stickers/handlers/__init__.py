from importlib import import_module

HANDLER_MODULES = ("help", "create")


def load_handlers():
    for name in HANDLER_MODULES:
        import_module(f".{name}", __package__)
