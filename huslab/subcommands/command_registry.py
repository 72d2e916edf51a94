#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/subcommands/command_registry.py

from . import (
    convert,
    mix
)

SUBCOMMANDS = {
    'convert': convert,
    'mix': mix
}
