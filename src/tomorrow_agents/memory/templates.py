TRAVEL_PROFILE_TEMPLATE = """# Travel Profile
- **Name**:
- **Preferred Destinations**:
- **Budget Range**:
- **Travel Style**:
- **Favorite Activities**:
- **Dietary Restrictions**:
- **Past Trips**:
"""

CREDO_PROFILE_TEMPLATE = """# Credo User Profile
## Personal Information
- **Name**:
- **Company/Role**:
- **Industry**:
- **LinkedIn Profile**:

## Content Preferences
- **Bio Style**: [professional/creative/executive]
- **Previous Bio Versions**:
  - Version 1:
  - Version 2:
  - Current:
- **Preferred Link Titles Style**: [action-oriented/descriptive/minimalist]
- **Theme Preference**:
- **Color Preferences**:

## Link Profile
- **Primary Links**:
- **Content Categories**:
- **Most Clicked Links**:
- **Link Performance Notes**:

## Interaction History
- **Last Bio Generation**:
- **Last Theme Recommendation**:
- **AI Suggestions Used**:
- **Feedback Notes**:
"""
