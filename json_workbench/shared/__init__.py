# json_workbench/shared/__init__.py

"""Utilities shared across layers"""
