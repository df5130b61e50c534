"""Plain-text rendering of result cards and status lines."""

from typing import List

from hospitalfinder.constants import LOADING_MESSAGE, NO_RESULTS_MESSAGE
from hospitalfinder.tools.hospital_tools import HospitalRecord
from hospitalfinder.utils.geo import tel_link
from hospitalfinder.workflows.state import FinderState


def render_card(hospital: HospitalRecord) -> str:
    lines = [
        hospital.name,
        f"  Address:  {hospital.address}",
    ]
    if hospital.distance is not None:
        lines.append(f"  Distance: {hospital.distance_label} km away")
    if hospital.phone:
        lines.append(f"  Phone:    {hospital.phone} ({tel_link(hospital.phone)})")
    lines.append(f"  Website:  {hospital.website or 'Not available'}")
    lines.append(f"  Map:      {hospital.map_link}")
    return "\n".join(lines)


def status_lines(state: FinderState) -> List[str]:
    """Loading / error / no-results lines, in display order."""
    lines = []
    if state.get("loading"):
        lines.append(LOADING_MESSAGE)
    if state.get("error"):
        lines.append(state["error"])
    if not state.get("loading") and state.get("search_completed") and not state.get("hospitals"):
        lines.append(NO_RESULTS_MESSAGE)
    return lines


def render_state(state: FinderState) -> str:
    parts = status_lines(state)
    parts.extend(render_card(h) for h in state.get("hospitals", []))
    return "\n\n".join(parts)
