"""
Demo records loaded into an empty store on startup.
"""

import logging
from datetime import datetime, timezone

from codeshelf.domain.models.records import Snippet, Tag, TagType, User
from codeshelf.domain.repositories.interfaces import (
    SnippetRepository,
    TagRepository,
    UserRepository,
)
from codeshelf.infrastructure.security.passwords import hash_password

logger = logging.getLogger(__name__)

SEED_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)

DEMO_USERS = [
    # id, email, name, username, password, created
    ("1", "demo@example.com", "Demo User", "demo", "demo123", datetime(2024, 1, 1, tzinfo=timezone.utc)),
    ("2", "john@example.com", "John Doe", "johndoe", "password123", datetime(2024, 1, 15, tzinfo=timezone.utc)),
    ("3", "sarah@example.com", "Sarah Smith", "sarahsmith", "password123", datetime(2024, 2, 1, tzinfo=timezone.utc)),
]

LANGUAGE_TAGS = [
    ("1", "JavaScript", "javascript"),
    ("2", "TypeScript", "typescript"),
    ("3", "Python", "python"),
    ("4", "Java", "java"),
    ("5", "C++", "cpp"),
    ("6", "Go", "go"),
    ("7", "Rust", "rust"),
    ("8", "PHP", "php"),
    ("9", "Ruby", "ruby"),
    ("10", "Swift", "swift"),
]

TOPIC_TAGS = [
    ("11", "Algorithm", "algorithm"),
    ("12", "Data Structure", "data-structure"),
    ("13", "Sorting", "sorting"),
    ("14", "Searching", "searching"),
    ("15", "API", "api"),
    ("16", "React", "react"),
    ("17", "Database", "database"),
    ("18", "Authentication", "authentication"),
    ("19", "Utility", "utility"),
    ("20", "Performance", "performance"),
]

QUICK_SORT = """function quickSort(arr) {
  if (arr.length <= 1) return arr;
  const pivot = arr[arr.length - 1];
  const left = [];
  const right = [];
  for (let i = 0; i < arr.length - 1; i++) {
    if (arr[i] < pivot) {
      left.push(arr[i]);
    } else {
      right.push(arr[i]);
    }
  }
  return [...quickSort(left), pivot, ...quickSort(right)];
}

// Example usage
const numbers = [64, 34, 25, 12, 22, 11, 90];
console.log(quickSort(numbers));"""

BINARY_SEARCH = """def binary_search(arr, target):
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        elif arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1

# Example usage
numbers = [1, 3, 5, 7, 9, 11, 13, 15]
print(binary_search(numbers, 7))"""

DEBOUNCE = """function debounce(func, delay) {
  let timeoutId;
  return function (...args) {
    clearTimeout(timeoutId);
    timeoutId = setTimeout(() => {
      func.apply(this, args);
    }, delay);
  };
}"""

BUBBLE_SORT = """func bubbleSort(items []int) {
    for i := 0; i < len(items); i++ {
        for j := 0; j < len(items)-i-1; j++ {
            if items[j] > items[j+1] {
                items[j], items[j+1] = items[j+1], items[j]
            }
        }
    }
}"""

DEMO_SNIPPETS = [
    # id, title, description, code, language, author, public, complexity, tags, created
    ("1", "Quick Sort Algorithm", "Efficient sorting algorithm using divide and conquer approach",
     QUICK_SORT, "javascript", "1", True, "O(n log n)", ["1", "11", "13"],
     datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)),
    ("2", "Binary Search Implementation", "Efficient search algorithm for sorted arrays",
     BINARY_SEARCH, "python", "2", True, "O(log n)", ["3", "11", "14"],
     datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc)),
    ("3", "Debounce Function", "Utility function to limit the rate at which a function is executed",
     DEBOUNCE, "javascript", "3", True, None, ["1", "19", "20"],
     datetime(2024, 3, 12, 16, 45, tzinfo=timezone.utc)),
    ("4", "Bubble Sort Draft", "Work in progress, not ready to share",
     BUBBLE_SORT, "go", "1", False, "O(n²)", ["6", "13"],
     datetime(2024, 3, 20, 8, 0, tzinfo=timezone.utc)),
]


async def seed_demo_data(
    users: UserRepository,
    snippets: SnippetRepository,
    tags: TagRepository,
) -> bool:
    """Load demo records when no user exists yet. Returns True if seeded."""
    if await users.list_all():
        logger.info("Store already populated, skipping demo data")
        return False

    for user_id, email, name, username, password, created in DEMO_USERS:
        await users.add(
            User(
                id=user_id,
                email=email,
                name=name,
                username=username,
                password_hash=hash_password(password),
                created_at=created,
                updated_at=created,
            )
        )

    for tag_type, rows in ((TagType.LANGUAGE, LANGUAGE_TAGS), (TagType.TOPIC, TOPIC_TAGS)):
        for tag_id, name, slug in rows:
            await tags.add(
                Tag(id=tag_id, name=name, slug=slug, type=tag_type,
                    created_at=SEED_EPOCH, updated_at=SEED_EPOCH)
            )

    for (snippet_id, title, description, code, language, author_id,
         is_public, complexity, tag_ids, created) in DEMO_SNIPPETS:
        await snippets.add(
            Snippet(
                id=snippet_id,
                title=title,
                description=description,
                code=code,
                language=language,
                author_id=author_id,
                is_public=is_public,
                time_complexity=complexity,
                tags=tag_ids,
                created_at=created,
                updated_at=created,
            )
        )

    logger.info(
        f"Seeded {len(DEMO_USERS)} users, {len(LANGUAGE_TAGS) + len(TOPIC_TAGS)} tags "
        f"and {len(DEMO_SNIPPETS)} snippets"
    )
    return True
