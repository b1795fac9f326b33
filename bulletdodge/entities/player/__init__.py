from bulletdodge.entities.player.player_input import InputFlags, NO_INPUT
from bulletdodge.entities.player.player_core import PlayerController

__all__ = ['InputFlags', 'NO_INPUT', 'PlayerController']
