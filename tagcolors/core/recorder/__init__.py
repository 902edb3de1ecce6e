from .options import RecorderOption, UseTagColors

__all__ = ["RecorderOption", "UseTagColors"]
