"""Utility 패키지"""
