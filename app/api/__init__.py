"""API模块"""
