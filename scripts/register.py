#!/usr/bin/python3

from zep_vouching.v2_1.cli import cli

if __name__ == "__main__":
    cli()
