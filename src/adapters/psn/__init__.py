"""Adaptadores del servicio de trofeos.

Por qué un paquete:
- Agrupa el I/O contra el endpoint (`trophyTitles`) y el usuario dueño del
  cliente HTTP.
"""

from adapters.psn.trophy_titles import TrophyTitlesIterator
from adapters.psn.user import User

__all__ = [
	"TrophyTitlesIterator",
	"User",
]
