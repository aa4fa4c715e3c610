"""Note name to frequency and frequency to MIDI note conversion.

All frequencies are derived from a table of octave-4 reference pitches (the
octave containing middle C and A440). Other octaves are reached by doubling or
halving one octave at a time, moving outward from the centre rather than
raising the ratio to a power.

Module-level constants:
- `OCTAVE`: The 12 octave-4 reference frequencies in Hz, starting at C.
- `OCTAVE_SCALE`: The matching note symbols (``"C"``, ``"C#"``, ... ``"B"``).
- `SEMITONE_RATIO`: Equal-tempered semitone step used by the inverse search.
- `ANCHOR_FREQUENCY` / `ANCHOR_MIDI_NOTE`: 523.251 Hz is MIDI note 72 (C5).

Note symbols are a letter A-G (any case) optionally followed by ``'#'`` (sharp)
or ``'b'`` (flat). Flats are case sensitive: only a lowercase ``'b'`` is read as
a flat so that it is never confused with the note ``B``.

Example:
	```python
	import pitchmath.pitch

	pitchmath.pitch.note_to_frequency("A", 4)       # → 440.0
	pitchmath.pitch.note_to_frequency("c#", 2)      # → 69.29575
	pitchmath.pitch.frequency_to_midi_note(440.0)   # → 69
	```
"""

import logging
import math
import typing


logger = logging.getLogger(__name__)


C: float = 261.626
C_SHARP: float = 277.183
D: float = 293.665
D_SHARP: float = 311.127
E: float = 329.628
F: float = 349.228
F_SHARP: float = 369.994
G: float = 391.995
G_SHARP: float = 415.305
A: float = 440.0
A_SHARP: float = 466.164
B: float = 493.883

OCTAVE: typing.Tuple[float, ...] = (C, C_SHARP, D, D_SHARP, E, F, F_SHARP, G, G_SHARP, A, A_SHARP, B)

OCTAVE_SCALE: typing.Tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

FLAT: str = "b"
SHARP: str = "#"

REFERENCE_OCTAVE: int = 4

SEMITONE_RATIO: float = 1.05946309436

ANCHOR_FREQUENCY: float = 523.251
ANCHOR_MIDI_NOTE: int = 72

DEFAULT_MAX_SEARCH_STEPS: int = 1000


def lookup_base_frequency (letter: str, enharmonic: int = 0) -> float:

	"""Return the octave-4 frequency for a note letter shifted by ``enharmonic`` semitones.

	The shifted index wraps at the table edges: an index of 12 or more gives
	the first entry (C) and a negative index gives the last entry (B). Both
	stay in octave 4, so ``B#`` resolves to middle C rather than C5 and ``Cb``
	resolves to B4.

	Parameters:
		letter: An upper-case symbol from `OCTAVE_SCALE`.
		enharmonic: ``-1`` for flat, ``0`` for natural, ``1`` for sharp.

	Returns:
		The frequency in Hz, or ``0.0`` when the letter is not in the table.
	"""

	for i, symbol in enumerate(OCTAVE_SCALE):

		if symbol != letter:
			continue

		k = i + enharmonic

		# Wraps without changing octave.
		if k >= len(OCTAVE):
			return OCTAVE[0]

		if k < 0:
			return OCTAVE[-1]

		return OCTAVE[k]

	logger.debug(f"Unknown note letter {letter!r}")

	return 0.0


def parse_note (note: str) -> typing.Tuple[str, int]:

	"""Split a note symbol into its upper-case letter and enharmonic shift.

	The letter is always read from the first character when a modifier is
	present. A lowercase ``b`` in first position is the letter B, not a flat.
	Strings that do not start with a table letter are returned as-is
	(upper-cased) and fail the later lookup.

	Example:
		```python
		parse_note("Db")   # → ("D", -1)
		parse_note("bb")   # → ("B", -1)
		parse_note("f#")   # → ("F", 1)
		parse_note("e")    # → ("E", 0)
		parse_note("DB")   # → ("DB", 0)
		```
	"""

	if FLAT in note[1:]:
		return note[:1].upper(), -1

	if SHARP in note:
		return note[:1].upper(), 1

	return note.upper(), 0


def note_to_frequency (note: str, octave: int) -> float:

	"""Return the frequency in Hz of ``note`` in ``octave``.

	Parameters:
		note: Note symbol, e.g. ``"A"``, ``"c#"``, ``"Eb"``.
		octave: Target octave, normally 0-9. Not validated.

	Returns:
		The frequency in Hz, or ``0.0`` if the note is not recognised.
	"""

	letter, enharmonic = parse_note(note)
	frequency = lookup_base_frequency(letter, enharmonic)

	if octave == REFERENCE_OCTAVE:
		return frequency

	d = octave - REFERENCE_OCTAVE

	# One octave per step, outward from octave 4.
	for _ in range(abs(d)):
		if d > 0:
			frequency *= 2
		else:
			frequency *= 0.5

	return frequency


def _step_down (ref: float) -> float:

	"""One semitone down, truncated to three decimals."""

	return math.floor(1000 * ref / SEMITONE_RATIO) / 1000


def _step_up (ref: float) -> float:

	"""One semitone up, truncated to three decimals."""

	return math.floor(1000 * ref * SEMITONE_RATIO) / 1000


def frequency_to_midi_note (frequency: float, max_steps: int = DEFAULT_MAX_SEARCH_STEPS) -> int:

	"""Return the MIDI note number nearest to ``frequency``.

	Walks semitone by semitone from 523.251 Hz (MIDI 72), truncating the
	reference to three decimal places after every step, until the target is
	bracketed. The closer bracket wins; on a tie the upper one does.

	Because of the truncation the walked pitches drift slightly flat of true
	equal temperament, so results near the midpoint between two semitones can
	differ from a logarithmic calculation.

	Parameters:
		frequency: A positive, finite frequency in Hz.
		max_steps: Upper bound on search steps before giving up.

	Returns:
		The MIDI note number.

	Raises:
		ValueError: If ``frequency`` is not positive and finite, ``max_steps``
			is below one, or the search does not settle within ``max_steps`` steps.

	Example:
		```python
		frequency_to_midi_note(523.251)  # → 72
		frequency_to_midi_note(440.0)    # → 69
		frequency_to_midi_note(27.5)     # → 21
		```
	"""

	if not math.isfinite(frequency) or frequency <= 0:
		raise ValueError(f"frequency must be positive and finite, got {frequency!r}")

	if max_steps < 1:
		raise ValueError("max_steps must be at least 1")

	ref = ANCHOR_FREQUENCY
	steps = 0
	walked = 0
	lower: typing.Optional[float] = None
	upper: typing.Optional[float] = None

	while frequency < ref:
		ref = _step_down(ref)
		steps -= 1
		walked += 1
		lower = ref

		if walked > max_steps:
			raise ValueError(f"No MIDI note found for {frequency!r} Hz within {max_steps} steps")

	while frequency > ref:
		ref = _step_up(ref)
		steps += 1
		walked += 1
		upper = ref

		if walked > max_steps:
			raise ValueError(f"No MIDI note found for {frequency!r} Hz within {max_steps} steps")

	if upper is not None:

		if lower is None:
			# Only climbed, so probe one semitone below the upper bracket.
			lower = _step_down(upper)

		if abs(frequency - lower) < abs(frequency - upper):
			steps -= 1

	midi_note = ANCHOR_MIDI_NOTE + steps

	logger.debug(f"{frequency} Hz -> MIDI {midi_note} after {walked} steps")

	return midi_note
