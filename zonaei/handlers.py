"""Request handlers of the skill.

Intent names are reused across conversation phases (``proyectosEntry``,
``Callback``), so most handlers also look at the session state to decide
whether they apply. The SDK asks each handler in registration order; see
:mod:`zonaei.router` for that order.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Optional

from ask_sdk_core.dispatch_components import AbstractExceptionHandler, AbstractRequestHandler
from ask_sdk_core.handler_input import HandlerInput
from ask_sdk_core.utils import get_intent_name, get_slot, is_intent_name, is_request_type
from ask_sdk_model import Response

from zonaei import config, speech
from zonaei.api_client import ProgramsClient, stage_for_program
from zonaei.state import (
    AppState,
    clear_current_project,
    get_app_state,
    get_current_program,
    get_current_project,
    set_app_state,
    set_current_program,
    set_current_project,
)

log = logging.getLogger(__name__)

PROGRAM_STATES = {
    AppState.PROGRAMS_QUERY_START,
    AppState.PROGRAM_INTEREST_QUERY,
    AppState.SINGLE_PROGRAM_QUERY,
}


class SlotMissingError(Exception):
    """Raised when an intent arrives without a slot the handler needs."""


def resolve_slot(handler_input: HandlerInput, slot_name: str) -> str:
    """Return the canonical entity name of a slot, falling back to the heard value."""
    slot = get_slot(handler_input, slot_name)
    if slot is None:
        raise SlotMissingError(slot_name)
    resolutions = slot.resolutions
    if resolutions and resolutions.resolutions_per_authority:
        values = resolutions.resolutions_per_authority[0].values
        if values:
            return values[0].value.name
    if not slot.value:
        raise SlotMissingError(slot_name)
    return slot.value


def is_yes(answer: Optional[str]) -> bool:
    """``True`` for "si"/"sí" in any case."""
    if not answer:
        return False
    folded = unicodedata.normalize("NFKD", answer.strip().lower())
    return "".join(c for c in folded if not unicodedata.combining(c)) == "si"


def _ask(handler_input: HandlerInput, text: str) -> Response:
    return handler_input.response_builder.speak(text).ask(text).response


def _transition(handler_input: HandlerInput, state: AppState) -> None:
    log.debug("state %s -> %s", get_app_state(handler_input), state.name)
    set_app_state(handler_input, state)


class _ProgramsHandler(AbstractRequestHandler):
    """Base for handlers that talk to the programs API."""

    def __init__(self, client: ProgramsClient):
        self.client = client

    def list_projects(self, program: str) -> str:
        projects = self.client.get_projects_by_stage(stage_for_program(program))
        return speech.projects_listing(program, (p["name"] for p in projects))

    def describe_project(self, name: str) -> str:
        project = self.client.get_project(name)
        if project is None:
            return speech.NO_PROJECT_INFO
        return speech.project_description(project["name"], project["description"])


class LaunchRequestHandler(AbstractRequestHandler):
    def can_handle(self, handler_input):
        return is_request_type("LaunchRequest")(handler_input)

    def handle(self, handler_input):
        _transition(handler_input, AppState.START)
        return _ask(handler_input, speech.WELCOME)


class InformationSwitchHandler(_ProgramsHandler):
    """``proyectosEntry`` right after a program was described.

    The user asked about a program and now wants its projects, so list them
    instead of the generic projects introduction.
    """

    def can_handle(self, handler_input):
        return (
            is_intent_name("proyectosEntry")(handler_input)
            and get_app_state(handler_input) == AppState.PROGRAM_TO_PROJECT_SWITCH
        )

    def handle(self, handler_input):
        program = get_current_program(handler_input)
        if not program:
            return _ask(handler_input, speech.NO_PROJECTS)
        return _ask(handler_input, self.list_projects(program))


class ProyectosEntryIntentHandler(AbstractRequestHandler):
    def can_handle(self, handler_input):
        return is_intent_name("proyectosEntry")(handler_input)

    def handle(self, handler_input):
        _transition(handler_input, AppState.PROJECT_START)
        return _ask(handler_input, speech.PROJECTS_ENTRY)


class ProyectoInfoIntentHandler(_ProgramsHandler):
    def can_handle(self, handler_input):
        return is_intent_name("proyectoInfo")(handler_input) and get_app_state(handler_input) in (
            AppState.SINGLE_PROJECT_QUERY,
            AppState.PROJECTS_LISTING,
            AppState.PROJECT_START,
        )

    def handle(self, handler_input):
        _transition(handler_input, AppState.SINGLE_PROJECT_QUERY)
        name = resolve_slot(handler_input, "proyecto")
        project = self.client.get_project(name)
        if project is None:
            clear_current_project(handler_input)
            return _ask(handler_input, speech.NO_PROJECT_INFO)
        set_current_project(handler_input, name)
        return _ask(handler_input, speech.project_description(project["name"], project["description"]))


class ProgramasEntryIntentHandler(AbstractRequestHandler):
    """Reachable from any state so the user can always restart with programs."""

    def can_handle(self, handler_input):
        return is_intent_name("programasEntry")(handler_input)

    def handle(self, handler_input):
        _transition(handler_input, AppState.PROGRAMS_QUERY_START)
        return _ask(handler_input, speech.PROGRAMS_ENTRY)


class InformationIntentHandler(_ProgramsHandler):
    """Describe a program, or list its projects when not in a programs phase."""

    def can_handle(self, handler_input):
        return is_intent_name("Information")(handler_input)

    def handle(self, handler_input):
        name = resolve_slot(handler_input, "programaName")

        if get_app_state(handler_input) not in PROGRAM_STATES:
            text = self.list_projects(name)
            _transition(handler_input, AppState.PROJECTS_LISTING)
            return _ask(handler_input, text)

        program = self.client.get_program(name)
        if program is None:
            text = speech.NO_PROGRAM_INFO
        else:
            text = speech.program_description(name, program["description"])
            set_current_program(handler_input, name)
        # the next proyectosEntry lists this program's projects
        _transition(handler_input, AppState.PROGRAM_TO_PROJECT_SWITCH)
        return _ask(handler_input, text)


class ProgramInscriptionIntentHandler(AbstractRequestHandler):
    def __init__(self, email: str = config.ENROLLMENT_EMAIL):
        self.email = email

    def can_handle(self, handler_input):
        return is_intent_name("programaInscripcion")(handler_input) and get_app_state(
            handler_input
        ) in PROGRAM_STATES | {AppState.PROGRAM_TO_PROJECT_SWITCH}

    def handle(self, handler_input):
        text = speech.enrollment(get_current_program(handler_input), self.email)
        _transition(handler_input, AppState.PROGRAM_INTEREST_QUERY)
        return _ask(handler_input, text)


class RepeatIntentHandler(_ProgramsHandler):
    def can_handle(self, handler_input):
        return (
            is_intent_name("AMAZON.RepeatIntent")(handler_input)
            and get_app_state(handler_input) == AppState.SINGLE_PROJECT_QUERY_ENDED
        )

    def handle(self, handler_input):
        project = get_current_project(handler_input)
        if not project:
            return _ask(handler_input, speech.NO_PROJECT_INFO)
        return _ask(handler_input, self.describe_project(project))


class HelpIntentHandler(AbstractRequestHandler):
    HELP_BY_STATE = {
        AppState.PROGRAMS_QUERY_START: speech.HELP_PROGRAMS_QUERY_START,
        AppState.SINGLE_PROGRAM_QUERY: speech.HELP_SINGLE_PROGRAM_QUERY,
        AppState.PROGRAM_INTEREST_QUERY: speech.HELP_PROGRAM_INTEREST_QUERY,
        AppState.START: speech.HELP_START,
    }

    def can_handle(self, handler_input):
        return is_intent_name("AMAZON.HelpIntent")(handler_input)

    def handle(self, handler_input):
        text = self.HELP_BY_STATE.get(get_app_state(handler_input), speech.HELP_START)
        return _ask(handler_input, text)


class CancelAndStopIntentHandler(AbstractRequestHandler):
    def can_handle(self, handler_input):
        return is_intent_name("AMAZON.CancelIntent")(handler_input) or is_intent_name(
            "AMAZON.StopIntent"
        )(handler_input)

    def handle(self, handler_input):
        return (
            handler_input.response_builder.speak(speech.GOODBYE)
            .set_should_end_session(True)
            .response
        )


class SessionEndedRequestHandler(AbstractRequestHandler):
    def can_handle(self, handler_input):
        return is_request_type("SessionEndedRequest")(handler_input)

    def handle(self, handler_input):
        log.info("session ended: %s", getattr(handler_input.request_envelope.request, "reason", None))
        _transition(handler_input, AppState.START)
        return handler_input.response_builder.speak(speech.GOODBYE).response


class CallbackIntentHandler(AbstractRequestHandler):
    """Yes/no answers to the question asked on the previous turn."""

    def can_handle(self, handler_input):
        return is_intent_name("Callback")(handler_input) and get_app_state(handler_input) in (
            AppState.PROGRAM_INTEREST_QUERY,
            AppState.SINGLE_PROJECT_QUERY,
            AppState.SINGLE_PROJECT_QUERY_ENDED,
        )

    def handle(self, handler_input):
        state = get_app_state(handler_input)
        slot = get_slot(handler_input, "sino")
        if slot is None:
            raise SlotMissingError("sino")
        yes = is_yes(slot.value)

        if state == AppState.SINGLE_PROJECT_QUERY:
            if yes:
                project = get_current_project(handler_input)
                if not project:
                    _transition(handler_input, AppState.PROJECT_START)
                    return _ask(handler_input, speech.NO_PROJECT_INFO)
                _transition(handler_input, AppState.SINGLE_PROJECT_QUERY_ENDED)
                return _ask(handler_input, speech.project_contact(project))
            goodbye = speech.THANKS
        else:
            if yes:
                _transition(handler_input, AppState.PROGRAMS_QUERY_START)
                return _ask(handler_input, speech.ASK_AGAIN)
            goodbye = speech.GOODBYE

        _transition(handler_input, AppState.START)
        return handler_input.response_builder.speak(goodbye).set_should_end_session(True).response


class IntentReflectorHandler(AbstractRequestHandler):
    """Catch-all for intents no other handler took; speaks the intent name."""

    def can_handle(self, handler_input):
        return is_request_type("IntentRequest")(handler_input)

    def handle(self, handler_input):
        intent_name = get_intent_name(handler_input)
        log.warning("unhandled intent %s in state %s", intent_name, get_app_state(handler_input))
        return _ask(handler_input, speech.reflect_intent(intent_name))


class CatchAllExceptionHandler(AbstractExceptionHandler):
    def can_handle(self, handler_input, exception):
        return True

    def handle(self, handler_input, exception):
        log.error("Error handled: %s", exception, exc_info=exception)
        return _ask(handler_input, speech.APOLOGY)
