import logging
import re
from collections.abc import Iterable, Mapping

from arbgen.classes import ClassifiedKeySet, PluralFamily, Quantity

logger = logging.getLogger(__name__)

# $name or ${name} with a Dart identifier, unless the dollar sign is escaped by a single backslash
PARAMETER_REGEX = re.compile(r"(?<!\\)\$(\{[A-Za-z_]\w*\}|[A-Za-z_]\w*)")

DEFAULT_PLURAL_PARAMETER = "param"


def normalize_parameter(parameter: str) -> str:
    """Trim the dollar sign and the curly braces Flutter allows around a parameter."""
    return parameter.strip("${}")


def extract_parameters(value: str) -> list[str]:
    parameters: list[str] = []
    for match in PARAMETER_REGEX.finditer(value):
        parameter = normalize_parameter(match.group())
        if parameter not in parameters:
            parameters.append(parameter)
    return parameters


def first_parameter(value: str, default: str = DEFAULT_PLURAL_PARAMETER) -> str:
    match = PARAMETER_REGEX.search(value)
    if match is None:
        return default
    return normalize_parameter(match.group())


def group_plurals(
    keys: Iterable[str], values: Mapping[str, str]
) -> tuple[list[PluralFamily], set[str]]:
    """Find the plural families among ``keys``.

    A family is only kept when its ``other`` quantity is declared, otherwise
    its keys are left to be classified as independent strings.
    """
    families: dict[str, PluralFamily] = {}
    members: dict[str, list[str]] = {}
    for key in keys:
        quantity = Quantity.from_suffix(key)
        if quantity is None:
            continue
        base_id = key[: len(key) - len(quantity.value)]
        family = families.setdefault(base_id, PluralFamily(base_id))
        if quantity in family.values:
            logger.warning(
                f'Plural "{base_id}" declares {quantity.value} twice, keeping the first one and treating "{key}" as a string'
            )
            continue
        family.values[quantity] = values[key]
        members.setdefault(base_id, []).append(key)

    accepted: list[PluralFamily] = []
    consumed: set[str] = set()
    for base_id, family in families.items():
        if not family.is_valid:
            logger.debug(f'"{base_id}" has no "other" quantity, not a plural')
            continue
        accepted.append(family)
        consumed.update(members[base_id])
    return accepted, consumed


def classify(keys: Iterable[str], values: Mapping[str, str]) -> tuple[list[str], list[str]]:
    plain: list[str] = []
    parametrized: list[str] = []
    for key in keys:
        if extract_parameters(values[key]):
            parametrized.append(key)
        else:
            plain.append(key)
    return plain, parametrized


def classify_locale(keys: Iterable[str], values: Mapping[str, str]) -> ClassifiedKeySet:
    keys = list(keys)
    plurals, consumed = group_plurals(keys, values)
    plain, parametrized = classify([key for key in keys if key not in consumed], values)
    return ClassifiedKeySet(plain, parametrized, plurals)
