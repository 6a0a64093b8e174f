"""Parsers that turn UGC league pages into model objects."""