"""派对策划助手"""
