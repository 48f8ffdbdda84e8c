"""
User preferences management for the ReID Viewer application.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Preferences:
    """Manage user preferences with persistent storage."""
    
    def __init__(self, pref_dir: Optional[Path] = None):
        """Initialize preferences with default values."""
        self.pref_dir = Path(pref_dir) if pref_dir else Path.home() / ".reid_viewer"
        self.pref_file = self.pref_dir / "preferences.json"
        self.defaults = {
            "dataset": {
                "images_subdir": "images",
                "similarity_file": "cos_similarity.csv",
                "last_directory": ""
            },
            "ui": {
                "max_image_size": 700,
                "window_width": 1400,
                "window_height": 900
            }
        }
        self.prefs = self.load()
    
    def load(self) -> Dict:
        """Load preferences from disk."""
        if self.pref_file.exists():
            try:
                with open(self.pref_file, 'r') as f:
                    saved_prefs = json.load(f)
                    # Merge with defaults to handle new preferences
                    return self._merge_with_defaults(saved_prefs)
            except (OSError, ValueError) as e:
                logger.warning("Error loading preferences: %s", e)
                return copy.deepcopy(self.defaults)
        else:
            return copy.deepcopy(self.defaults)
    
    def _merge_with_defaults(self, saved: Dict) -> Dict:
        """Merge saved preferences with defaults."""
        merged = copy.deepcopy(self.defaults)
        if not isinstance(saved, dict):
            return merged
        
        def deep_update(base: Dict, update: Dict):
            for key, value in update.items():
                if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                    deep_update(base[key], value)
                else:
                    base[key] = value
        
        deep_update(merged, saved)
        return merged
    
    def save(self):
        """Save preferences to disk."""
        try:
            self.pref_dir.mkdir(parents=True, exist_ok=True)
            with open(self.pref_file, 'w') as f:
                json.dump(self.prefs, f, indent=2)
        except OSError as e:
            logger.warning("Error saving preferences: %s", e)
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get a preference value using dot notation (e.g., 'dataset.last_directory')."""
        keys = key.split('.')
        value = self.prefs
        
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        
        return value
    
    def set(self, key: str, value: Any):
        """Set a preference value using dot notation."""
        keys = key.split('.')
        target = self.prefs
        
        # Navigate to the parent dict
        for k in keys[:-1]:
            if k not in target:
                target[k] = {}
            target = target[k]
        
        target[keys[-1]] = value
        self.save()
    
    def reset(self):
        """Reset all preferences to defaults."""
        self.prefs = copy.deepcopy(self.defaults)
        self.save()


# Global preferences instance
_preferences = None

def get_preferences() -> Preferences:
    """Get the global preferences instance."""
    global _preferences
    if _preferences is None:
        _preferences = Preferences()
    return _preferences
