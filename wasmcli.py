#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from wasmtx.user.command import main
import sys


if __name__ == '__main__':
    sys.exit(main())
