"""Serialisers and parsers for the JSON files stored in a Scrivi project."""