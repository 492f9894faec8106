"""Core 패키지 - 설정/로깅/예외"""
