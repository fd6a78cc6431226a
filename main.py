from __future__ import annotations

import json
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication
from loguru import logger

from app.viewmodels.content_vm import ContentVM
from app.viewmodels.sorting_vm import GallerySortingVM
from infrastructure.content_repository import JsonContentRepository, to_json_dict
from infrastructure.logging import find_latest_log_file, init_logging
from infrastructure.settings import JsonSettings, load_gallery_config
from infrastructure.sorting_cache import JsonSortingCache
from infrastructure.utils import parse_sorting_method


BASE_DIR = Path(__file__).parent
USAGE = "usage: main.py LISTING.json [SORTING] [GROUPING]"


def _load_settings() -> JsonSettings | None:
    try:
        return JsonSettings(BASE_DIR / "settings.json")
    except FileNotFoundError as ex:
        logger.warning("{}; using built-in defaults", ex)
        return None


def main(argv: list[str]) -> int:
    if not argv or len(argv) > 3:
        print(USAGE, file=sys.stderr)
        return 2

    settings = _load_settings()
    log_dir = init_logging(settings.get("logging.dir") if settings else None)
    logger.info("Logging to {}", find_latest_log_file(str(log_dir)))
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])  # noqa: F841

    config = load_gallery_config(settings)
    cache_path = settings.get("sorting.cachePath") if settings else None
    cache = JsonSortingCache(cache_path or BASE_DIR / "sorting_cache.json")

    content_vm = ContentVM()
    vm = GallerySortingVM(content_vm, cache, config)
    view = vm.apply_sorting()

    repo = JsonContentRepository()
    content = repo.load(argv[0])
    logger.info(
        "Loaded {}: {} directories, {} media",
        content.key,
        len(content.directories or []),
        len(content.media or []),
    )
    content_vm.set_content(content)

    for arg, setter in zip(argv[1:], (vm.set_sorting, vm.set_grouping)):
        method = parse_sorting_method(arg)
        if method is None:
            print(f"unknown method: {arg}", file=sys.stderr)
            return 2
        setter(method)

    logger.info("Sorting={} grouping={}", vm.sorting.value, vm.grouping.value)
    print(json.dumps(to_json_dict(view.value), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
