"""Spoken replies of the skill."""

from typing import Iterable, Optional

WELCOME = (
    "¡Hola! Bienvenido a la Zona Ei. Estoy aquí para apoyarte a conocer más sobre "
    "programas de emprendimiento en el Tec y sus proyectos participantes. "
    "¿Qué deseas saber?"
)

PROGRAMS_ENTRY = (
    "Existen 3 programas para emprendedores, los cuáles te pueden ayudar a validar. "
    "desarrollar. o crecer tu idea de negocio. "
    "¿Cuál de las 3 opciones te gustaría explorar?"
)

PROJECTS_ENTRY = (
    "Los proyectos inscritos en programas de emprendimiento se dividen por 3 etapas "
    "de negocio: Validación. desarrollo. y crecimiento. "
    "¿Qué tipo de proyectos te gustaría conocer?"
)

NO_PROGRAM_INFO = "No tengo información de este programa. "
NO_PROJECTS = "No tenemos proyectos relacionados a este programa. "
NO_PROJECT_INFO = "No tengo información de este proyecto. ¿Qué más deseas saber?"
ANYTHING_ELSE = "¿Hay algo más en lo que pueda ayudarte?"
ASK_AGAIN = "Perfecto, ¿Qué deseas saber?"
GOODBYE = "Adios. Ojalá te haya sido de ayuda"
THANKS = "Muchas gracias por visitar la Zona Ei ¡Regresa pronto!"
APOLOGY = "Perdón no pude hacer lo que me pediste, intentalo de nuevo"

HELP_START = (
    "Te puedo dar información acerca de los programas que soportamos. "
    "Y te puedo dar información acerca de los proyectos actualmente en desarrollo"
)
HELP_PROGRAMS_QUERY_START = (
    "Puedes preguntarme acerca de todos los programas que tenemos. "
    "También puedo decirte como puedes involucrarte con nosotros. "
    "O puedo decirte acerca de los proyectos en los cuales se están trabajando actualmente. "
)
HELP_SINGLE_PROGRAM_QUERY = (
    "Puedes preguntarme de los proyectos a los cuales puedes inscribirte. "
    "También puedo decirte como puedes involucrarte con nosotros. "
)
HELP_PROGRAM_INTEREST_QUERY = (
    "Puedes preguntar acerca de los demás programas que tenemos. "
    "También puedes preguntarme acerca de los grupos que actualmente están en desarrollo"
)


def program_description(name: str, description: str) -> str:
    return (
        f"El programa {name} {description}. "
        "¿Te interesa saber cómo inscribirte, O "
        "Te gustaría conocer los proyectos inscritos al programa?"
    )


def projects_listing(program: str, project_names: Iterable[str]) -> str:
    """List the projects of a program, or say there are none."""
    names = list(project_names)
    if not names:
        return NO_PROJECTS
    if len(names) == 1:
        text = f"Para el programa {program} tenemos a {names[0]}. "
    else:
        text = f"Para el programa {program} tenemos a los proyectos: {', '.join(names)}. "
    return text + "¿Te interesa conocer más de alguno de los proyectos?"


def project_description(name: str, description: str) -> str:
    return (
        f"{name} es un proyecto enfocado a {description}. "
        "¿Te interesa hacer contacto con ellos?"
    )


def enrollment(program: Optional[str], email: str) -> str:
    target = f"al programa {program}" if program else "a un programa"
    return (
        f"Para inscribirte {target}, necesitas mandar una carta motivos y "
        f"una descripción de tu idea de negocio al correo {email}. "
        f"{ANYTHING_ELSE}"
    )


def project_contact(project: str) -> str:
    return (
        f"Puedes encontrar al equipo de {project} en nuestras sesiones "
        f"mensuales de networking o contactarlos en el correo de "
        f"contacto@{project.replace(' ', '').lower()}.com. "
        f"{ANYTHING_ELSE}"
    )


def reflect_intent(intent_name: str) -> str:
    return f"Acabas de activar {intent_name}"
