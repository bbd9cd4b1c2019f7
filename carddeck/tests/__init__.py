"""
Tests Module - 测试框架

Test Categories:
    unit/: 单元测试 - 测试单个模块功能
    property/: 性质测试 - 基于hypothesis验证牌组不变量
    anti_cheat/: 反作弊工具 - 确保测试使用真实的核心对象
"""
