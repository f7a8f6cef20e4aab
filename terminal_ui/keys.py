"""Keyboard input to game actions."""

from blackjack.game.actions import Action

# Typed words are accepted alongside the single keys
KEY_BINDINGS: dict[str, Action] = {
    "h": Action.HIT,
    "hit": Action.HIT,
    "s": Action.STAND,
    "stand": Action.STAND,
    "q": Action.QUIT,
    "quit": Action.QUIT,
    "enter": Action.ADVANCE,
    "space": Action.ADVANCE,
}


def key_to_action(raw: str) -> Action | None:
    """
    Translate one line of input into an action.

    An empty line (Enter) or only spaces advances. Unknown input maps to
    None and is ignored by the loop.
    """
    key = raw.strip().lower()
    if not key:
        return Action.ADVANCE
    return KEY_BINDINGS.get(key)
