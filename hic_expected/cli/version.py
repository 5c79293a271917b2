name = "version"
description = "Print the package version."

from .. import __version__

def add_arguments(subparser):
    pass

def run(args):
    print(__version__)
