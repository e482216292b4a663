# Lazy imports: the names below resolve on first use. Importing
# catchforge.core, errors or constants leaves java_model unloaded, and
# with it the tree-sitter grammar.

__all__ = [
    "ClassModel",
    "MethodStub",
    "SymbolRef",
    "HandlerSpec",
    "HandlerSynthesizer",
    "create_container",
    "create_handler",
    "ProjectLayout",
    "load_config",
]

_IMPORT_MAP = {
    "ClassModel": ".java_model",
    "MethodStub": ".java_model",
    "SymbolRef": ".java_model",
    "HandlerSpec": ".synthesis",
    "HandlerSynthesizer": ".synthesis",
    "create_container": ".synthesis",
    "create_handler": ".synthesis",
    "ProjectLayout": ".project",
    "load_config": ".config",
}


def __getattr__(name):
    if name in _IMPORT_MAP:
        import importlib
        module = importlib.import_module(_IMPORT_MAP[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module 'catchforge.core' has no attribute {name}")
