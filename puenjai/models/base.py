"""
SQLAlchemy Base 설정
"""

from sqlalchemy.orm import declarative_base

# Base 모델
Base = declarative_base()
