"""Profile package contains conversions of the measured points to other formats"""
