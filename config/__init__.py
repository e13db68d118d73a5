"""配置模块"""
