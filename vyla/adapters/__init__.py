"""
Couche infrastructure : adaptateurs vers les services externes.
"""
