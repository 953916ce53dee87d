# nvimgen Key Chord Capture
# Normalize key presses into Neovim chord notation and parse chords back into tokens

from dataclasses import dataclass, field

LEADER = "<leader>"

SPECIAL_KEYS: dict[str, str] = {
    " ": "Space",
    "Enter": "CR",
    "Escape": "Esc",
    "Backspace": "BS",
    "Delete": "Del",
    "Tab": "Tab",
    "ArrowUp": "Up",
    "ArrowDown": "Down",
    "ArrowLeft": "Left",
    "ArrowRight": "Right",
    "Home": "Home",
    "End": "End",
    "PageUp": "PageUp",
    "PageDown": "PageDown",
    "Insert": "Insert",
}

MODIFIER_KEYS = frozenset({"Control", "Alt", "Shift", "Meta"})


@dataclass(frozen=True)
class KeyPress:
    """A physical key press: the logical key, its physical code and held modifiers."""

    key: str
    code: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    meta: bool = False

    @property
    def has_command_modifier(self) -> bool:
        """True if a modifier that changes the produced character is held."""
        return self.ctrl or self.alt or self.meta


def normalize_key(key: str) -> str:
    """
    Normalize a logical key name.

    Named keys use the substitution table, function keys and single
    characters pass through unchanged.
    """
    return SPECIAL_KEYS.get(key, key)


def _base_key(press: KeyPress) -> str:
    """Pick the base key, reading the physical code when Ctrl/Alt/Meta is held."""
    if press.has_command_modifier:
        if press.code.startswith("Key") and len(press.code) == 4:
            letter = press.code[3:]
            return letter.upper() if press.shift else letter.lower()
        if press.code.startswith("Digit") and len(press.code) == 6:
            return press.code[5:]
    return press.key


def _modifier_codes(press: KeyPress) -> list[str]:
    codes: list[str] = []
    if press.ctrl:
        codes.append("C")
    if press.alt:
        codes.append("A")
    if press.shift and press.key != "Shift":
        codes.append("S")
    if press.meta:
        codes.append("D")
    return codes


def is_leader(key: str, leader_key: str) -> bool:
    """Check whether a normalized key is the configured leader."""
    return key == leader_key or (key == "Space" and leader_key == " ")


def format_chord(press: KeyPress, leader_key: str) -> str:
    """
    Format a key press as a chord token.

    Args:
        press: The key press.
        leader_key: Configured leader character.

    Returns:
        Chord such as "x", "<leader>", "<CR>" or "<C-S-X>", or an empty
        string if only modifiers were pressed.
    """
    key = normalize_key(_base_key(press))
    if not key or key in MODIFIER_KEYS:
        return ""

    modifiers = _modifier_codes(press)
    if not modifiers:
        if is_leader(key, leader_key):
            return LEADER
        if len(key) == 1:
            return key
        return f"<{key}>"

    return f"<{'-'.join(modifiers)}-{key}>"


@dataclass
class ChordRecorder:
    """
    Capture a chord from successive key presses.

    A leader press keeps recording until one more key completes a
    leader-prefixed sequence. Any other press finalizes immediately.
    """

    leader_key: str = " "
    recording: bool = False
    sequence: list[str] = field(default_factory=list)

    def start(self) -> None:
        """Begin a new capture."""
        self.recording = True
        self.sequence = []

    def clear(self) -> str:
        """Abort the capture and return the empty (unbound) chord."""
        self.recording = False
        self.sequence = []
        return ""

    def press(self, press: KeyPress) -> str | None:
        """
        Feed one key press.

        Args:
            press: The key press.

        Returns:
            The finished chord, or None while capture continues or when
            not recording.
        """
        if not self.recording:
            return None

        token = format_chord(press, self.leader_key)
        if not token:
            return None

        if not self.sequence and token == LEADER:
            self.sequence = [token]
            return None

        chord = "".join([*self.sequence, token])
        self.recording = False
        self.sequence = []
        return chord

    @property
    def pending(self) -> list[str]:
        """Tokens captured so far in an unfinished sequence."""
        return list(self.sequence)


def parse_chord(chord: str) -> list[str]:
    """
    Split a chord string into display tokens.

    "<leader>" and bracketed groups are single tokens, every other
    character is its own token. An unmatched "<" is a plain character.
    """
    tokens: list[str] = []
    i = 0
    while i < len(chord):
        if chord[i] == "<":
            close = chord.find(">", i)
            if close != -1:
                tokens.append(chord[i : close + 1])
                i = close + 1
                continue
        tokens.append(chord[i])
        i += 1
    return tokens


def chip_label(token: str) -> str:
    """Label shown for a chord token."""
    if token == LEADER:
        return "Leader"
    if len(token) > 2 and token.startswith("<") and token.endswith(">"):
        return token[1:-1]
    return token
