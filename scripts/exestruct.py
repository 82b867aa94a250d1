#!/usr/bin/env python3
import sys
import os
import logging

from exestruct.cli import main


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


if __name__ == '__main__':
    sys.exit(main(sys.argv))
