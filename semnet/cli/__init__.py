# CLI package for SemNet
"""
Console interface for building and printing small semantic networks.

Commands:
    semnet demo   — Build john/book and print john
    semnet build  — Build a network from arguments and print concepts
"""
