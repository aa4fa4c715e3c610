"""
pitchmath - note name and frequency arithmetic for music software.

Converts a note name and octave into a frequency in Hz, and an arbitrary
frequency back into the nearest equal-tempered MIDI note number. Everything
is a pure function over fixed tables: no audio, no MIDI I/O.

- **Note to frequency.** ``note_to_frequency("A", 4)`` gives 440.0. Octaves
  are reached by doubling or halving from octave 4, one octave at a time.
- **Frequency to MIDI.** ``frequency_to_midi_note(440.0)`` gives 69. A
  semitone-by-semitone search from 523.251 Hz (MIDI 72) with three-decimal
  truncation per step.
- **Configuration.** ``load_config()`` reads search limits from YAML.

Minimal example:

    ```python
    import pitchmath

    hz = pitchmath.note_to_frequency("Eb", 3)
    midi = pitchmath.frequency_to_midi_note(hz)
    ```

Package-level exports: ``note_to_frequency``, ``frequency_to_midi_note``,
``PitchConfig``, ``load_config``.
"""

import pitchmath.config
import pitchmath.pitch


note_to_frequency = pitchmath.pitch.note_to_frequency
frequency_to_midi_note = pitchmath.pitch.frequency_to_midi_note
PitchConfig = pitchmath.config.PitchConfig
load_config = pitchmath.config.load_config
