"""
DevMatching 사용자 관리 백엔드
"""
