"""
Utility functions for GoodData Client.
"""

import logging
import sys
from typing import Any, Dict, List, Union


def setup_logging(level: str = "INFO", fmt: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s') -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=fmt,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    # Reduce noise from third-party libraries unless debugging
    if level.upper() != "DEBUG":
        for name in ("urllib3", "requests"):
            logging.getLogger(name).setLevel(logging.WARNING)


def parse_path_element(text: str) -> Union[str, Dict[str, str]]:
    """Parse one command line path element.

    ``md`` stays a bare category, ``category=project,title=Sales`` becomes a descriptor.
    """
    if '=' not in text or text.startswith('/') or '://' in text:
        return text
    descriptor: Dict[str, str] = {}
    for pair in text.split(','):
        if not pair.strip():
            continue
        key, sep, value = pair.partition('=')
        if not sep or not key.strip():
            raise ValueError(f"Invalid path element {text!r}, expected key=value[,key=value...]")
        descriptor[key.strip()] = value.strip()
    return descriptor


def parse_path(elements: List[str]) -> List[Any]:
    """Parse command line path elements."""
    return [parse_path_element(element) for element in elements]

