# -*- coding: utf-8 -*-
"""
Queries et mutations GraphQL de l'API bibliothèque.

Rôle:
    Regroupe les classes racines Query et Mutation assemblées dans schema.py.
"""
