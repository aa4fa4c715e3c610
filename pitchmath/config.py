"""YAML configuration for pitchmath.

Only the inverse search is tunable. A config file looks like:

	```yaml
	pitch:
	  max_search_steps: 2000
	```

Pass the loaded value through to the conversion:

	```python
	config = pitchmath.config.load_config("pitch.yaml")
	pitchmath.pitch.frequency_to_midi_note(hz, max_steps=config.max_search_steps)
	```
"""

import dataclasses
import logging
import os

import yaml

import pitchmath.pitch


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class PitchConfig:

	"""
	Settings for pitch conversion.

	Parameters:
		max_search_steps: Semitone steps the frequency search may take before
			giving up. The default covers roughly 80 octaves either side of
			the anchor.
	"""

	max_search_steps: int = pitchmath.pitch.DEFAULT_MAX_SEARCH_STEPS

	def __post_init__ (self) -> None:
		if isinstance(self.max_search_steps, bool) or not isinstance(self.max_search_steps, int):
			raise ValueError(f"max_search_steps must be an integer, got {self.max_search_steps!r}")
		if self.max_search_steps < 1:
			raise ValueError("max_search_steps must be at least 1")


def load_config (config_path: str = 'pitch.yaml') -> PitchConfig:

	"""
	Load a `PitchConfig` from a YAML file, falling back to defaults for anything missing.

	Raises:
		ValueError: If the file or its ``pitch`` section is not a mapping, or a
			value has the wrong type.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return PitchConfig()

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f) or {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	section = data.get('pitch') or {}

	if not isinstance(section, dict):
		raise ValueError(f"'pitch' section in {config_path} must be a mapping, got {type(section).__name__}")

	return PitchConfig(
		max_search_steps = section.get('max_search_steps', pitchmath.pitch.DEFAULT_MAX_SEARCH_STEPS)
	)
