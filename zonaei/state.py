"""Conversation state kept in the session attributes.

The voice platform hands back whatever attributes we stored on the previous
turn, so the state is persisted as a plain int and read back defensively.
"""

from enum import IntEnum
from typing import Optional

from ask_sdk_core.handler_input import HandlerInput

APP_STATE = "app-state"
SELECTED_PROGRAM = "current-program"
SELECTED_PROJECT = "current-project"


class AppState(IntEnum):
    START = 0
    PROGRAMS_QUERY_START = 1
    SINGLE_PROGRAM_QUERY = 2
    PROGRAM_INTEREST_QUERY = 3
    PROJECT_START = 4
    PROJECTS_LISTING = 5
    SINGLE_PROJECT_QUERY = 6
    SINGLE_PROJECT_QUERY_ENDED = 7
    PROGRAM_TO_PROJECT_SWITCH = 8


def get_app_state(handler_input: HandlerInput) -> Optional[AppState]:
    """Return the current state, or ``None`` when the session has none yet."""
    raw = handler_input.attributes_manager.session_attributes.get(APP_STATE)
    try:
        return AppState(int(raw))
    except (TypeError, ValueError):
        return None


def set_app_state(handler_input: HandlerInput, state: AppState) -> None:
    handler_input.attributes_manager.session_attributes[APP_STATE] = int(state)


def get_current_program(handler_input: HandlerInput) -> Optional[str]:
    return handler_input.attributes_manager.session_attributes.get(SELECTED_PROGRAM)


def set_current_program(handler_input: HandlerInput, program_name: str) -> None:
    handler_input.attributes_manager.session_attributes[SELECTED_PROGRAM] = program_name


def get_current_project(handler_input: HandlerInput) -> Optional[str]:
    return handler_input.attributes_manager.session_attributes.get(SELECTED_PROJECT)


def set_current_project(handler_input: HandlerInput, project_name: str) -> None:
    handler_input.attributes_manager.session_attributes[SELECTED_PROJECT] = project_name


def clear_current_project(handler_input: HandlerInput) -> None:
    handler_input.attributes_manager.session_attributes.pop(SELECTED_PROJECT, None)
