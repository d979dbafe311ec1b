"""Resolve command-line arguments and prompts into a render request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Union

from .config import DEFAULT_TEMPLATE
from .log import get_logger
from .render import RenderRequest
from .tags import parse_tags

PromptFunc = Callable[[str], str]

TEMPLATE_PROMPT = "Template name (possible templates: {templates}): "
NAME_PROMPT = "Name (optional): "
TAGS_PROMPT = "Tags (optional, JSON-formatted array): "
DATE_PROMPT = "Date (optional): "

logger = get_logger("resolver")


@dataclass(frozen=True, slots=True)
class NoArgs:
    """No positional arguments: use the default template, ask nothing."""


@dataclass(frozen=True, slots=True)
class OneArg:
    template: str


@dataclass(frozen=True, slots=True)
class TwoOrMoreArgs:
    template: str
    name: str


@dataclass(frozen=True, slots=True)
class WizardMode:
    """Prompt for every field, ignoring positional arguments."""

    available_templates: tuple[str, ...] = ()


Invocation = Union[NoArgs, OneArg, TwoOrMoreArgs, WizardMode]


@dataclass(frozen=True, slots=True)
class ResolvedInvocation:
    """Outcome of input resolution.

    ``template`` names the output file; ``template_name`` is the file read
    from the template directory.
    """

    template: str
    template_name: str
    request: RenderRequest


def classify_arguments(
    args: Sequence[str],
    *,
    wizard: bool = False,
    available_templates: Sequence[str] = (),
) -> Invocation:
    """Map the raw positional arguments onto an invocation variant."""

    if wizard:
        return WizardMode(available_templates=tuple(available_templates))
    if not args:
        return NoArgs()
    if len(args) == 1:
        return OneArg(template=args[0])
    return TwoOrMoreArgs(template=args[0], name=args[1])


def _ask(prompt: PromptFunc, text: str) -> str:
    return prompt(text).strip()


def resolve_invocation(
    invocation: Invocation,
    *,
    prompt: PromptFunc,
    today: Callable[[], str],
    default_template: str = DEFAULT_TEMPLATE,
    template_override: str | None = None,
) -> ResolvedInvocation:
    """Build the render inputs for ``invocation``, prompting where needed.

    Raises
    ------
    TagsParseError
        If the tags answer is not a JSON array of strings.
    """

    logger.debug("Resolving invocation %r", invocation)

    name = ""
    tags_input = ""
    date = ""

    if isinstance(invocation, WizardMode):
        templates = ", ".join(invocation.available_templates)
        template = _ask(prompt, TEMPLATE_PROMPT.format(templates=templates))
        template = template or default_template
        name = _ask(prompt, NAME_PROMPT)
        tags_input = _ask(prompt, TAGS_PROMPT)
        date = _ask(prompt, DATE_PROMPT)
    elif isinstance(invocation, NoArgs):
        template = default_template
    elif isinstance(invocation, OneArg):
        template = invocation.template
        name = _ask(prompt, NAME_PROMPT)
        tags_input = _ask(prompt, TAGS_PROMPT)
        date = _ask(prompt, DATE_PROMPT)
    elif isinstance(invocation, TwoOrMoreArgs):
        template = invocation.template
        name = invocation.name.strip()
        tags_input = _ask(prompt, TAGS_PROMPT)
        date = _ask(prompt, DATE_PROMPT)
    else:  # pragma: no cover - exhaustive over Invocation
        raise TypeError(f"Unknown invocation: {invocation!r}")

    tags = parse_tags(tags_input)

    return ResolvedInvocation(
        template=template,
        template_name=template_override or template,
        request=RenderRequest(date=date or today(), name=name, tags=tags),
    )
