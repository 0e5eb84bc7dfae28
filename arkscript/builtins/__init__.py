"""Builtin functions and constants available to ArkScript programs, with their registry."""