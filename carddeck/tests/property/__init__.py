"""
Property Tests - 性质测试

基于hypothesis的性质测试，验证发牌的唯一性、完整性和牌数单调递减。
"""
