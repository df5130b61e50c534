from .hospital_locator_workflow import HospitalLocatorWorkflow
from .state import FinderState, get_initial_state, state_to_dict

__all__ = [
    "HospitalLocatorWorkflow",
    "FinderState",
    "get_initial_state",
    "state_to_dict",
]
