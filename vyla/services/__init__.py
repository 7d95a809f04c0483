"""
Couche application : mise en forme des reponses, images, lecteurs, metriques.
"""
