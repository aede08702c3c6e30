from .composition import Composition, as_composition
