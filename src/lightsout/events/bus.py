from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so handlers bound to systems nobody keeps in a variable still fire.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_CELL_CLICK = "cell_click"                # payload: x, y
EVENT_RESET_REQUEST = "reset_request"          # payload: none


# ============================================================================
# BOARD STATE
# ============================================================================
EVENT_CELL_PRESSED = "cell_pressed"            # payload: x, y, move_count=int, toggled=list[(x,y)]
EVENT_MOVE_COUNT_CHANGED = "move_count_changed"  # payload: move_count=int
EVENT_BOARD_SOLVED = "board_solved"            # payload: move_count=int
EVENT_BOARD_SCRAMBLED = "board_scrambled"      # payload: attempts=int, presses=list[(x,y)]
