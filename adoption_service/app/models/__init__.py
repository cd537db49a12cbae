from .spaces import Space
from .adoptions import Adoption
from .media import Media

__all__ = ["Space", "Adoption", "Media"]
