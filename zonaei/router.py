"""Handler registry for the skill.

The SDK dispatcher asks handlers in the order they were registered and runs
the first one whose ``can_handle`` is true, so order here is behaviour:
state-guarded handlers must come before the unguarded ones sharing their
intent name.
"""

import logging
from typing import List, Optional

from ask_sdk_core.dispatch_components import AbstractExceptionHandler, AbstractRequestHandler
from ask_sdk_core.skill_builder import SkillBuilder

from zonaei import config
from zonaei.api_client import ProgramsClient
from zonaei.handlers import (
    CallbackIntentHandler,
    CancelAndStopIntentHandler,
    CatchAllExceptionHandler,
    HelpIntentHandler,
    InformationIntentHandler,
    InformationSwitchHandler,
    IntentReflectorHandler,
    LaunchRequestHandler,
    ProgramasEntryIntentHandler,
    ProgramInscriptionIntentHandler,
    ProyectoInfoIntentHandler,
    ProyectosEntryIntentHandler,
    RepeatIntentHandler,
    SessionEndedRequestHandler,
)


class SkillRouter:
    def __init__(self):
        self.handlers: List[AbstractRequestHandler] = []
        self.error_handlers: List[AbstractExceptionHandler] = []

    def register(self, handler: AbstractRequestHandler) -> None:
        """Append a handler; it is consulted after every handler registered before it."""
        self.handlers.append(handler)

    def register_error(self, handler: AbstractExceptionHandler) -> None:
        self.error_handlers.append(handler)

    def build(self, skill_id: Optional[str] = None) -> SkillBuilder:
        sb = SkillBuilder()
        if skill_id:
            sb.skill_id = skill_id
        for handler in self.handlers:
            sb.add_request_handler(handler)
        for handler in self.error_handlers:
            sb.add_exception_handler(handler)
        return sb


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    # Lambda installs its own root handler; basicConfig only matters locally
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)


def build_router(client: Optional[ProgramsClient] = None) -> SkillRouter:
    client = client or ProgramsClient()
    router = SkillRouter()
    router.register(LaunchRequestHandler())
    router.register(InformationSwitchHandler(client))
    router.register(ProyectosEntryIntentHandler())
    router.register(ProyectoInfoIntentHandler(client))
    router.register(ProgramasEntryIntentHandler())
    router.register(InformationIntentHandler(client))
    router.register(ProgramInscriptionIntentHandler())
    router.register(RepeatIntentHandler(client))
    router.register(HelpIntentHandler())
    router.register(CancelAndStopIntentHandler())
    router.register(SessionEndedRequestHandler())
    router.register(CallbackIntentHandler())
    router.register(IntentReflectorHandler())
    router.register_error(CatchAllExceptionHandler())
    return router


def build_skill_builder(client: Optional[ProgramsClient] = None) -> SkillBuilder:
    configure_logging()
    return build_router(client).build(skill_id=config.SKILL_ID)
