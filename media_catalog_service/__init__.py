"""Media catalog and personalization service"""
