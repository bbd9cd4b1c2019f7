"""
Unit Tests - 单元测试

每个测试都必须使用真实的核心对象。
"""
