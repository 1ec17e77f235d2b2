import logging
import os
import pathlib
import stat
import tempfile
from typing import Protocol

from arbgen import emitter, templates
from arbgen.classes import LocaleBundle
from arbgen.classifier import classify_locale
from arbgen.exceptions import MissingReferenceLocaleError

logger = logging.getLogger(__name__)


class BundleProvider(Protocol):
    def bundles(self) -> list[LocaleBundle]: ...

    def create_bundle(self, locale: str) -> LocaleBundle: ...


class OutputSink(Protocol):
    def read(self) -> str | None: ...

    def write(self, text: str) -> None: ...


class I18nFile:
    """The generated Dart file, replaced as a whole on every write."""

    def __init__(self, path: str | pathlib.Path) -> None:
        self.path = pathlib.Path(path)

    def read(self) -> str | None:
        try:
            return self.path.read_text("utf-8")
        except FileNotFoundError:
            return None

    def _file_mode(self) -> int:
        # mkstemp creates 0600 files, keep the mode a plain open() would give
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        mode = self._file_mode()
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
                tmp.write(text)
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except BaseException:
            pathlib.Path(tmp_name).unlink(missing_ok=True)
            raise


def _unique_bundles(bundles: list[LocaleBundle]) -> list[LocaleBundle]:
    unique: dict[str, LocaleBundle] = {}
    for bundle in bundles:
        if bundle.locale in unique:
            logger.warning(f"Locale {bundle.locale} is declared more than once, keeping the first file")
            continue
        unique[bundle.locale] = bundle
    return list(unique.values())


def build_document(bundles: list[LocaleBundle]) -> str:
    bundles = _unique_bundles(bundles)
    reference = next((b for b in bundles if b.locale == emitter.REFERENCE_LOCALE), None)
    if reference is None:
        raise MissingReferenceLocaleError(
            f"No strings_{emitter.REFERENCE_LOCALE}.arb found among "
            f"{', '.join(b.locale for b in bundles) or 'no bundles'}"
        )

    # The reference locale defines the members every other locale may override
    reference_set = classify_locale(reference.entries, reference.entries)
    reference_members = reference_set.member_names()

    parts = [
        templates.FILE_HEADER,
        emitter.emit_reference_class(reference_set, reference.entries),
        emitter.emit_locale_class(
            reference.locale, reference_set, reference.entries, is_reference=True
        ),
    ]

    locale_codes = [reference.locale]
    # a real he_IL bundle takes the place of the iw alias class
    hebrew_aliased = any(b.locale == emitter.HEBREW_CLASS for b in bundles)
    if hebrew_aliased and any(emitter.is_legacy_hebrew(b.locale) for b in bundles):
        logger.warning(f"{emitter.HEBREW_CLASS} is declared, iw locales will not be aliased to it")
    for bundle in bundles:
        if bundle is reference:
            continue
        locale_codes.append(bundle.locale)

        dropped = [key for key in bundle.entries if key not in reference.entries]
        if dropped:
            logger.debug(f"{bundle.locale}: dropping keys missing in {reference.locale}: {', '.join(dropped)}")
        keys = [key for key in bundle.entries if key in reference.entries]
        classified = classify_locale(keys, bundle.entries)

        unknown = classified.member_names() - reference_members
        for member in sorted(unknown):
            logger.warning(
                f'{bundle.locale}: "{member}" is not a member of the {reference.locale} class, its @override will not resolve'
            )

        hebrew_alias = emitter.is_legacy_hebrew(bundle.locale) and not hebrew_aliased
        hebrew_aliased = hebrew_aliased or hebrew_alias
        parts.append(
            emitter.emit_locale_class(
                bundle.locale, classified, bundle.entries, hebrew_alias=hebrew_alias
            )
        )

    parts.append(emitter.emit_delegate(locale_codes))
    return "".join(parts)


def generate(provider: BundleProvider, sink: OutputSink) -> bool:
    bundles = provider.bundles()
    if not bundles:
        logger.info(f"No string files found, creating one for {emitter.REFERENCE_LOCALE}")
        bundles = [provider.create_bundle(emitter.REFERENCE_LOCALE)]

    logger.info(f"Generating localizations for {len(bundles)} locales: {', '.join(b.locale for b in bundles)}")
    document = build_document(bundles)

    if sink.read() == document:
        logger.info("Generated file is up to date")
        return False

    sink.write(document)
    logger.info("Generated file updated")
    return True
