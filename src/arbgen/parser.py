#!/usr/bin/python3
# Copyright (c) 2023 Peace-Maker
import json
import logging
import pathlib

from arbgen.classes import LocaleBundle

logger = logging.getLogger(__name__)

FILE_PREFIX = "strings_"
FILE_EXTENSION = ".arb"


def locale_from_filename(name: str) -> str:
    """strings_fr_CA.arb -> fr_CA"""
    stem = pathlib.PurePath(name).stem
    return stem.partition("_")[2]


def is_strings_file(path: pathlib.Path) -> bool:
    return (
        path.suffix == FILE_EXTENSION
        and path.name.lower().startswith(FILE_PREFIX)
        and path.is_file()
    )


def parse_bundle(path: pathlib.Path) -> LocaleBundle | None:
    try:
        data = json.loads(path.read_text("utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as ex:
        logger.error(f"Error parsing {path.name}: {ex}")
        return None

    if not isinstance(data, dict):
        logger.error(f"File {path.name} does not contain a JSON object")
        return None

    entries: dict[str, str] = {}
    for key, value in data.items():
        if key.startswith("@"):
            continue
        if isinstance(value, (dict, list)):
            logger.warning(f'Skipping "{key}" in {path.name}: value is not a string')
            continue
        entries[key] = value if isinstance(value, str) else json.dumps(value)
    return LocaleBundle(locale_from_filename(path.name), entries)


class ValuesFolder:
    """The folder holding one ``strings_<locale>.arb`` file per locale."""

    def __init__(self, path: str | pathlib.Path) -> None:
        self.path = pathlib.Path(path)

    def bundles(self) -> list[LocaleBundle]:
        if not self.path.is_dir():
            logger.warning(f"Values folder {self.path} does not exist")
            return []

        bundles = []
        for file in sorted(self.path.glob(f"*{FILE_EXTENSION}")):
            if not is_strings_file(file):
                continue
            logger.debug(f"Parsing {file}")
            bundle = parse_bundle(file)
            if bundle is not None:
                bundles.append(bundle)
        return bundles

    def create_bundle(self, locale: str) -> LocaleBundle:
        self.path.mkdir(parents=True, exist_ok=True)
        file = self.path / f"{FILE_PREFIX}{locale}{FILE_EXTENSION}"
        if not file.exists():
            logger.info(f"Creating {file}")
            file.write_text("{}\n", "utf-8")
        return LocaleBundle(locale, {})
