#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Direct API startup script.

Equivalent to the `govinfo-api` console script. Reads `.env` from the
current directory when present.
"""
from govinfo.entrypoint import run

if __name__ == "__main__":
    run()
