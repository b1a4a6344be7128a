"""Application composition layer.

The controller in this package wires the layout state, history, adapters, and
use cases into one session object; ``main`` exposes it on the command line.
"""
