#!/usr/bin/env python
from httpstatus.__commands__ import cli

if __name__ == "__main__":
    cli(prog_name="httpstatus")
