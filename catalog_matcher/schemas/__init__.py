"""Pydantic 스키마"""
