import re
from collections.abc import Iterable, Mapping

from arbgen import templates
from arbgen.classes import ClassifiedKeySet, PluralFamily, Quantity
from arbgen.classifier import extract_parameters, first_parameter

REFERENCE_LOCALE = "en"
RTL_LANGUAGES = frozenset({"ar", "dv", "fa", "ha", "he", "iw", "ji", "ps", "ur", "yi"})

# Hebrew is still reported as "iw" by older platforms, the generated code serves it as he_IL
LEGACY_HEBREW_PREFIX = "iw"
HEBREW_CLASS = "he_IL"
HEBREW_CASES = ("iw_IL", "he_IL")

_OVERRIDE = "  @override\n"

# a $ that is neither escaped nor followed by an identifier or {
_BARE_DOLLAR_REGEX = re.compile(r"(?<!\\)\$(?![A-Za-z_{])")


def class_name(locale: str) -> str:
    return f"${locale}"


def split_locale(locale: str) -> tuple[str, str]:
    language, _, country = locale.partition("_")
    return language, country


def is_rtl(locale: str) -> bool:
    return split_locale(locale)[0] in RTL_LANGUAGES


def is_legacy_hebrew(locale: str) -> bool:
    return locale.startswith(LEGACY_HEBREW_PREFIX)


def dart_string(value: str) -> str:
    """Quote ``value`` as a Dart string literal.

    Backslashes and dollar signs are kept as written in the ARB file so that
    escapes and ``$param`` interpolations reach the generated code. A dollar
    sign that cannot start an interpolation is escaped.
    """
    escaped = (
        value.replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    escaped = _BARE_DOLLAR_REGEX.sub(r"\\$", escaped)
    return f'"{escaped}"'


def emit_string_getter(key: str, value: str, is_override: bool = True) -> str:
    prefix = _OVERRIDE if is_override else ""
    return f"{prefix}  String get {key} => {dart_string(value)};\n"


def emit_parametrized_method(key: str, value: str, is_override: bool = True) -> str:
    parameters = extract_parameters(value)
    if not parameters:
        return emit_string_getter(key, value, is_override)
    prefix = _OVERRIDE if is_override else ""
    signature = ", ".join(f"String {parameter}" for parameter in parameters)
    return f"{prefix}  String {key}({signature}) => {dart_string(value)};\n"


def emit_plural_method(family: PluralFamily, is_override: bool = True) -> str:
    other = family.values.get(Quantity.OTHER)
    if other is None:
        return ""
    parameter = first_parameter(other)

    lines = []
    if is_override:
        lines.append(_OVERRIDE)
    lines.append(f"  String {family.method_name}(dynamic {parameter}) {{\n")
    lines.append(f"    switch ({parameter}.toString()) {{\n")
    for quantity in Quantity:
        if quantity.case_label is None or quantity not in family.values:
            continue
        lines.append(f'      case "{quantity.case_label}":\n')
        lines.append(f"        return {dart_string(family.values[quantity])};\n")
    lines.append("      default:\n")
    lines.append(f"        return {dart_string(other)};\n")
    lines.append("    }\n  }\n")
    return "".join(lines)


def _emit_members(
    classified: ClassifiedKeySet, values: Mapping[str, str], is_override: bool
) -> str:
    members = [emit_string_getter(key, values[key], is_override) for key in classified.plain]
    members += [
        emit_parametrized_method(key, values[key], is_override)
        for key in classified.parametrized
    ]
    members += [emit_plural_method(family, is_override) for family in classified.plurals]
    return "".join(members)


def emit_reference_class(classified: ClassifiedKeySet, values: Mapping[str, str]) -> str:
    body = _emit_members(classified.sorted(), values, is_override=False)
    return f"{templates.REFERENCE_CLASS_HEADER}{body}}}\n\n"


def emit_locale_class(
    locale: str,
    classified: ClassifiedKeySet,
    values: Mapping[str, str],
    *,
    is_reference: bool = False,
    hebrew_alias: bool | None = None,
) -> str:
    name = class_name(locale)
    if is_reference:
        return f"class {name} extends S {{\n  const {name}();\n}}\n\n"

    direction = "rtl" if is_rtl(locale) else "ltr"
    text = (
        f"class {name} extends S {{\n  const {name}();\n\n"
        f"{_OVERRIDE}  TextDirection get textDirection => TextDirection.{direction};\n\n"
    )
    text += _emit_members(classified, values, is_override=True)
    text += "}\n\n"

    if hebrew_alias is None:
        hebrew_alias = is_legacy_hebrew(locale)
    if hebrew_alias:
        alias = class_name(HEBREW_CLASS)
        text += (
            f"class {alias} extends {name} {{\n  const {alias}();\n\n"
            f"{_OVERRIDE}  TextDirection get textDirection => TextDirection.rtl;\n}}\n\n"
        )
    return text


def supported_locale(locale: str) -> tuple[str, str]:
    if is_legacy_hebrew(locale):
        return split_locale(HEBREW_CASES[1])
    return split_locale(locale)


def emit_delegate(locale_codes: Iterable[str]) -> str:
    locale_codes = list(locale_codes)

    supported: list[tuple[str, str]] = []
    for locale in locale_codes:
        entry = supported_locale(locale)
        if entry not in supported:
            supported.append(entry)
    text = templates.DELEGATE_HEADER
    text += "".join(
        f'      Locale("{language}", "{country}"),\n' for language, country in supported
    )

    text += templates.DELEGATE_RESOLUTION
    seen_cases: set[str] = set()
    for locale in locale_codes:
        if is_legacy_hebrew(locale):
            cases, target = HEBREW_CASES, HEBREW_CLASS
        else:
            cases, target = (locale,), locale
        cases = tuple(case for case in cases if case not in seen_cases)
        if not cases:
            continue
        seen_cases.update(cases)
        text += "".join(f'        case "{case}":\n' for case in cases)
        text += (
            f"          S._current = const {class_name(target)}();\n"
            "          return SynchronousFuture<S>(S.current);\n"
        )

    text += templates.DELEGATE_FOOTER
    return text
