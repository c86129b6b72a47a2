"""Console collaborators: interactive prompts and result rendering."""

from hcpsizer.console.input_collector import NumberPrompt, SizingInputCollector
from hcpsizer.console.presenter import SizingPresenter

__all__ = ["NumberPrompt", "SizingInputCollector", "SizingPresenter"]
