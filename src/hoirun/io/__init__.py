from hoirun.io.override_reader import OverrideReader, variables_text

__all__ = ["OverrideReader", "variables_text"]
