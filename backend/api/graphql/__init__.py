# -*- coding: utf-8 -*-
"""
Module GraphQL de l'API bibliothèque.

Rôle:
    Types Book/Author, queries et mutations exposés sur /graphql.

Dépendances:
    - strawberry: Framework GraphQL
    - backend.api.services: accès au store en mémoire
"""
