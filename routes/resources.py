from flask import Blueprint, jsonify, request

# Create blueprint
resources_bp = Blueprint('resources', __name__)

# Self-help resources by category
RESOURCES = {
    'breathing': [
        {
            'title': '4-7-8 Breathing',
            'description': 'Breathe in for 4 counts, hold for 7, exhale for 8. Helps reduce anxiety.',
            'duration': '2-5 minutes'
        },
        {
            'title': 'Box Breathing',
            'description': 'Breathe in for 4, hold for 4, out for 4, hold for 4. Great for focus.',
            'duration': '3-5 minutes'
        },
        {
            'title': 'Deep Belly Breathing',
            'description': 'Slow, deep breaths into your belly. Perfect for relaxation.',
            'duration': '5-10 minutes'
        }
    ],
    'study': [
        {
            'title': 'Pomodoro Technique',
            'description': 'Study for 25 minutes, then take a 5-minute break. After 4 sessions, '
                           'take a longer 15-30 minute break.',
            'topic': 'Productivity'
        },
        {
            'title': 'Active Recall',
            'description': 'Test yourself on material instead of just re-reading. '
                           'Create flashcards or practice questions.',
            'topic': 'Learning'
        },
        {
            'title': 'Study Environment',
            'description': 'Find a quiet, well-lit space. Keep your phone away and minimize distractions.',
            'topic': 'Environment'
        },
        {
            'title': 'Break It Down',
            'description': 'Divide large tasks into smaller, manageable chunks. Celebrate small wins along the way.',
            'topic': 'Planning'
        },
        {
            'title': 'Sleep Well',
            'description': 'Aim for 7-9 hours of sleep. Your brain consolidates learning during sleep.',
            'topic': 'Health'
        },
        {
            'title': 'Stay Hydrated',
            'description': 'Keep water nearby. Dehydration can affect concentration and cognitive performance.',
            'topic': 'Health'
        }
    ],
    'crisis': [
        {
            'title': '988 Suicide & Crisis Lifeline',
            'description': '24/7 free and confidential support',
            'contact': 'Call or text 988'
        },
        {
            'title': 'Crisis Text Line',
            'description': 'Text with a trained crisis counselor',
            'contact': 'Text HOME to 741741'
        },
        {
            'title': 'Campus Counseling Center',
            'description': 'Your school likely offers free counseling services for students',
            'contact': 'Check your university website'
        }
    ],
    'self_care': [
        {'title': 'Take regular breaks from studying and screens'},
        {'title': 'Exercise for at least 30 minutes, 3-4 times per week'},
        {'title': 'Maintain a consistent sleep schedule'},
        {'title': 'Eat balanced, nutritious meals'},
        {'title': 'Stay connected with friends and family'},
        {'title': "Practice gratitude - write down 3 things you're grateful for each day"}
    ]
}

CATEGORIES = [
    ('breathing', 'Breathing Exercises'),
    ('study', 'Study Tips'),
    ('crisis', 'Crisis Support'),
    ('self_care', 'Self-Care')
]

@resources_bp.route('/resources')
def index():
    """
    Return wellbeing resources, optionally narrowed to a single category.
    """
    category = request.args.get('category', '').lower()

    if category:
        # Unknown categories yield an empty list
        return jsonify({
            'category': category,
            'resources': RESOURCES.get(category, [])
        })

    return jsonify({
        'categories': [{'key': key, 'label': label} for key, label in CATEGORIES],
        'resources': RESOURCES
    })
