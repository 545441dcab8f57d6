"""Conectores de plataformas externas.

Cada conector é o único ponto de IO com a sua plataforma:
- telegram/: Bot API (upload de mídia)
"""
