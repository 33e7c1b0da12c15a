"""
Group configuration: the community groups whose events are fetched.

The built-in list covers the nine groups published on meetup.mu. A YAML
file (``Settings.groups_file``) can replace it:

    groups:
      - slug: pymug
      - slug: frontendmu
        endpoint: https://example.org/frontendmu.json
        output_path: data/frontend/events.json
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import yaml

from meetupdata.data.fetch.fetcher_base import GroupConfig
from meetupdata.settings import Settings

logger = logging.getLogger(__name__)

MEETUP_GROUP_SLUGS = (
    "frontendmu",
    "mscc",
    "pydata",
    "cloudnativemu",
    "nugm",
    "laravelmoris",
    "gophersmu",
    "mobilehorizon",
    "pymug",
)


def default_group(slug: str, settings: Settings) -> GroupConfig:
    """Group config following the API's URL scheme and the data/ layout."""
    return GroupConfig(
        slug=slug,
        endpoint=f"{settings.api_base_url.rstrip('/')}/{slug}",
        output_path=settings.data_dir / slug / "events.json",
    )


def _check_unique(groups: Sequence[GroupConfig]) -> None:
    seen = set()
    for group in groups:
        if group.slug in seen:
            raise ValueError(f"Duplicate group slug: {group.slug}")
        seen.add(group.slug)


def load_groups_file(path: Path, settings: Settings) -> List[GroupConfig]:
    """
    Load groups from a YAML file; missing endpoint/output_path fields fall
    back to the defaults. Relative output paths resolve against root_dir.
    """
    if not path.exists():
        raise FileNotFoundError(f"Groups file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    groups = []
    for entry in cfg.get("groups", []):
        group = default_group(entry["slug"], settings)
        output_path = entry.get("output_path")
        if output_path is not None:
            output_path = Path(output_path)
            if not output_path.is_absolute():
                output_path = settings.root_dir / output_path
        groups.append(
            group.model_copy(
                update={
                    "endpoint": entry.get("endpoint") or group.endpoint,
                    "output_path": output_path or group.output_path,
                }
            )
        )
    logger.debug("Loaded %d groups from %s", len(groups), path)
    return groups


def build_groups(
    settings: Settings, slugs: Optional[Iterable[str]] = None
) -> List[GroupConfig]:
    """
    Build the configured groups, optionally restricted to ``slugs``.

    Raises:
        KeyError: If a requested slug is not configured
        ValueError: If the configuration repeats a slug
    """
    if settings.groups_file:
        groups = load_groups_file(Path(settings.groups_file), settings)
    else:
        groups = [default_group(slug, settings) for slug in MEETUP_GROUP_SLUGS]
    _check_unique(groups)

    slugs = list(slugs or [])
    if not slugs:
        return groups

    by_slug = {g.slug: g for g in groups}
    unknown = [s for s in slugs if s not in by_slug]
    if unknown:
        raise KeyError(f"Unknown group(s): {', '.join(unknown)}")
    return [by_slug[s] for s in dict.fromkeys(slugs)]
