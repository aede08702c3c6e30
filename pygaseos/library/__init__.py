from .library import component_library
