#!/usr/bin/env python3
"""
Print the to-be-signed part of a PEM encoded X.509 certificate.
Usage:
  python src/cert_decoder.py certs/server.pem
Exits 0 after printing, 1 on any error (message on stderr).
"""
import sys, logging
from pathlib import Path

from pyasn1.error import PyAsn1Error

from cert_common import (CertDecoderError, UsageError, PathError,
                         load_certificate, render_tbs)
from cert_config import load_config, configure_logging

logger = logging.getLogger(__name__)

USAGE_ERROR = ("Error: did not receive a single argument, please invoke "
               "cert-decoder as follows: ./cert-decoder /path/to/cert.")
PATH_ERROR = ("Error: path given as argument is not a regular file, "
              "it must be a path to a certificate!")


class PathValidator:
    """Answers whether a path names a regular file.

    Tests pass a fake with a fixed answer instead of touching the disk.
    """

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()


class FileProcessor(PathValidator):
    """PathValidator that can also read the file it validated."""

    def read_to_string(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()


def check_arguments(args) -> str:
    if len(args) != 1:
        raise UsageError(USAGE_ERROR)
    return args[0]

def check_path(validator, path: str):
    if not validator.is_file(path):
        raise PathError(PATH_ERROR)

def validate(validator, args) -> str:
    path = check_arguments(args)
    check_path(validator, path)
    logger.debug("%s is a regular file", path)
    return path

def execute(processor, args) -> str:
    """Run the whole pipeline and return the text to print.

    Raises on the first failing step; nothing is returned for partial work.
    """
    path = validate(processor, args)
    text = processor.read_to_string(path)
    logger.debug("read %d characters from %s", len(text), path)
    return render_tbs(load_certificate(text))


def _run(step, argv):
    configure_logging(load_config()["log_level"])
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        out = step(args)
    except (CertDecoderError, OSError, ValueError, PyAsn1Error) as e:
        logger.debug("failed with %s", type(e).__name__)
        print(e, file=sys.stderr)
        return 1
    if out is not None:
        print(out)
    return 0

def validate_main(argv=None) -> int:
    def step(args):
        validate(PathValidator(), args)
    return _run(step, argv)

def main(argv=None) -> int:
    return _run(lambda args: execute(FileProcessor(), args), argv)


if __name__ == "__main__":
    sys.exit(main())
