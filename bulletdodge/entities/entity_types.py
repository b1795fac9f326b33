"""
entity_types.py
---------------
Collision tags carried by every entity as entity.collision_tag.

CollisionManager only tests pairs of tags listed in its rules, so a new
kind of projectile can be made harmless by giving it a tag with no rule.
"""


class CollisionTags:
    PLAYER = "player"
    ENEMY_BULLET = "enemy_bullet"
