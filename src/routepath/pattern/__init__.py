"""Pattern compilation, parameter extraction, and path injection.

A pattern is compiled once into a cached ``CompiledPattern``; extraction
matches concrete paths against it and injection turns it back into text.
"""
