"""Selection state machine and the viewer session that owns it."""

from .session import Dataset, ViewerSession
from .state import Click, InteractionStateMachine, ViewState

__all__ = ["Click", "Dataset", "InteractionStateMachine", "ViewState", "ViewerSession"]
