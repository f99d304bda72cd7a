"""Static achievement catalog.

Reference data only; it is never persisted. Which ids are unlocked lives
in the tracker's own snapshot.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AchievementDefinition:
    id: int
    title: str
    description: str
    icon: str
    color: str


ACHIEVEMENTS: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(1, "First Suitcase", "Create your first trip checklist", "suitcase", "blue"),
    AchievementDefinition(2, "Nothing Forgotten", "Check off all items in one trip", "checkmark.circle.fill", "green"),
    AchievementDefinition(3, "Light Backpack", "Create a checklist with < 5 items", "backpack", "yellow"),
    AchievementDefinition(4, "Packed the Whole House", "Create a checklist with > 30 items", "house.fill", "purple"),
    AchievementDefinition(5, "Weekend Traveler", "Complete a 1–2 day trip checklist", "calendar", "orange"),
    AchievementDefinition(6, "Packing Master", "Complete 5 different trips", "star.fill", "red"),
    AchievementDefinition(7, "Experienced Tourist", "Complete 10 different trips", "globe", "indigo"),
    AchievementDefinition(8, "Baggage Organizer", "Add notes to 10 items", "note.text", "pink"),
    # 9-12 have no unlock rule yet.
    AchievementDefinition(9, "Seasonal Traveler", "Create checklists for 4 seasons", "leaf", "mint"),
    AchievementDefinition(10, "No Panic", "Complete on the day of departure", "clock.fill", "red"),
    AchievementDefinition(11, "Everything Under Control", "Complete a week before departure", "calendar.badge.checkmark", "green"),
    AchievementDefinition(12, "Global Tourist", "Use the app in two languages", "character.cursor.ibeam", "blue"),
    AchievementDefinition(13, "Note Master", "Add your first note", "pencil", "orange"),
    AchievementDefinition(14, "Checklist Pro", "Create 20 trip checklists", "trophy.fill", "yellow"),
    AchievementDefinition(15, "Road Legend", "Complete 50 checklists", "crown.fill", "purple"),
)

ACHIEVEMENTS_BY_ID: dict[int, AchievementDefinition] = {a.id: a for a in ACHIEVEMENTS}


def get_definition(achievement_id: int) -> AchievementDefinition | None:
    return ACHIEVEMENTS_BY_ID.get(int(achievement_id))
