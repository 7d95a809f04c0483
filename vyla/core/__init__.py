"""
Couche domaine : entités, objets valeur, erreurs et ports.
"""
