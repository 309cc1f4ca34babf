"""Normalization and aggregation services.

Pure modules (periods, odds, buckets, standings, favorites, box_score)
take core entities and return new ones. aggregation drives a refresh;
refresh keeps the latest model around for the API.
"""
