"""工具模块。"""
