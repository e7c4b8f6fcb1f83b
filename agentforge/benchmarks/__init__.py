"""Loaders for public benchmark task files and result normalisation."""