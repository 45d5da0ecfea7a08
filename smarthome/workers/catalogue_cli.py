from __future__ import annotations

import argparse
import json
import logging

from smarthome.config import AppConfig, CatalogueConfig, load_config, setup_logging
from smarthome.domain.exceptions import ConfigurationError
from smarthome.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Inspect the sensor and actuator catalogues."""
    parser = argparse.ArgumentParser(prog="smarthome-catalogue")
    parser.add_argument(
        "command",
        nargs="?",
        choices=("names", "functionalities"),
        default="names",
        help="names: recognised type names (default); functionalities: every functionality tag",
    )
    parser.add_argument("--config", dest="config_path", help="Catalogue configuration file to read")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of plain text")
    args = parser.parse_args(argv)

    try:
        config: AppConfig = load_config()
        setup_logging(debug=config.DEBUG, log_file=config.log_file or None, log_level=config.log_level)
        catalogue_config = CatalogueConfig.from_file(args.config_path) if args.config_path else None
        container = ServiceContainer.build(config, catalogue_config=catalogue_config)
    except ConfigurationError as e:
        logger.error("%s", e)
        return 2

    if args.command == "functionalities":
        result = {
            "sensor": [f.value for f in container.sensor_catalogue.list_functionalities()],
            "actuator": [f.value for f in container.actuator_catalogue.list_functionalities()],
        }
    else:
        result = {
            "sensor": container.sensor_catalogue.list_recognized_names(),
            "actuator": container.actuator_catalogue.list_recognized_names(),
        }

    if args.json:
        print(json.dumps(result, indent=2))
        return 0

    for family, entries in result.items():
        print(f"{family}:")
        for entry in entries:
            print(f"  {entry}")
    return 0


if __name__ == "__main__":
    import sys

    raise SystemExit(main(sys.argv[1:]))
