"""
Fixture data for a fresh database.

Every group is inserted only when its table is empty and the admin only
when the username is free, so seeding twice never duplicates rows.
"""

import logging

from werkzeug.security import generate_password_hash

logger = logging.getLogger(__name__)

PROJECTS = [
    {'title': 'Modern E-commerce Platform', 'description': 'A complete digital shopping experience for a fashion brand',
     'category': 'Web Design', 'client': 'Fashion Brand',
     'image_url': 'https://images.unsplash.com/photo-1558655146-d09347e92766?w=600&auto=format&fit=crop', 'featured': True},
    {'title': 'NextGen Banking App', 'description': 'Intuitive mobile banking experience with advanced security',
     'category': 'Mobile Apps', 'client': 'Financial Services',
     'image_url': 'https://images.unsplash.com/photo-1551650975-87deedd944c3?w=600&auto=format&fit=crop', 'featured': True},
    {'title': 'Evergreen Rebranding', 'description': 'Complete brand refresh for an established sustainability company',
     'category': 'Brand Identity', 'client': 'Eco Solutions',
     'image_url': 'https://images.unsplash.com/photo-1559028012-481c04fa702d?w=600&auto=format&fit=crop', 'featured': True},
    {'title': 'Analytics Dashboard', 'description': 'Data visualization platform for marketing professionals',
     'category': 'Web Design', 'client': 'Marketing Agency',
     'image_url': 'https://images.unsplash.com/photo-1559028006-448665bd7c7b?w=600&auto=format&fit=crop', 'featured': False},
    {'title': 'Fitness Tracking App', 'description': 'Comprehensive fitness solution with social features',
     'category': 'Mobile Apps', 'client': 'Health Tech',
     'image_url': 'https://images.unsplash.com/photo-1553484771-047a44eee27a?w=600&auto=format&fit=crop', 'featured': False},
    {'title': 'Culinary Brand Identity', 'description': 'Fresh identity for an upscale restaurant chain',
     'category': 'Brand Identity', 'client': 'Restaurant Group',
     'image_url': 'https://images.unsplash.com/photo-1569017388730-020b5f80a004?w=600&auto=format&fit=crop', 'featured': False},
]

SERVICES = [
    {'title': 'Web Development', 'icon': 'laptop-code',
     'description': 'Custom websites and web applications built on current technologies.',
     'features': ['Responsive design', 'CMS integration', 'E-commerce solutions']},
    {'title': 'Mobile App Development', 'icon': 'mobile-alt',
     'description': 'Native and cross-platform mobile applications for every device.',
     'features': ['iOS & Android apps', 'React Native & Flutter', 'App maintenance & updates']},
    {'title': 'UI/UX Design', 'icon': 'paint-brush',
     'description': 'User-centered design for intuitive and memorable digital products.',
     'features': ['User research', 'Wireframing & prototyping', 'Design systems']},
    {'title': 'Digital Marketing', 'icon': 'bullhorn',
     'description': 'Campaigns that increase visibility, drive traffic and generate leads.',
     'features': ['SEO & content strategy', 'Social media marketing', 'PPC & display advertising']},
    {'title': 'Brand Identity', 'icon': 'layer-group',
     'description': 'Branding that establishes a strong and distinctive market presence.',
     'features': ['Logo & visual identity', 'Brand guidelines', 'Brand messaging']},
    {'title': 'Analytics & Optimization', 'icon': 'chart-line',
     'description': 'Data-driven insights to improve the performance of digital assets.',
     'features': ['Performance analysis', 'Conversion rate optimization', 'A/B testing']},
]

PRODUCTS = [
    {'name': 'LaunchKit CMS', 'category': 'Software', 'price': '$49/month',
     'description': 'Headless content management for marketing teams.',
     'features': ['Visual editor', 'Scheduled publishing', 'Role-based access'],
     'image_url': 'https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=600&auto=format&fit=crop',
     'screenshots': [], 'featured': True, 'is_popular': True},
    {'name': 'Pulse Analytics', 'category': 'Software', 'price': '$29/month',
     'description': 'Lightweight, privacy-friendly website analytics.',
     'features': ['Realtime dashboard', 'Goal tracking', 'Email reports'],
     'image_url': 'https://images.unsplash.com/photo-1551288049-bebda4e38f71?w=600&auto=format&fit=crop',
     'screenshots': [], 'featured': True, 'is_popular': False},
    {'name': 'Brand Starter Pack', 'category': 'Design', 'price': '$499',
     'description': 'Logo, palette and typography guidelines for new ventures.',
     'features': ['Three logo concepts', 'Colour palette', 'Brand guideline PDF'],
     'image_url': 'https://images.unsplash.com/photo-1561070791-2526d30994b5?w=600&auto=format&fit=crop',
     'screenshots': [], 'featured': False, 'is_popular': False},
]

JOB_OPENINGS = [
    {'title': 'Senior UI/UX Designer', 'location': 'Remote', 'type': 'Full-time', 'salary': 'Competitive',
     'description': 'Create user experiences for web and mobile applications together with our development teams.',
     'active': True},
    {'title': 'Full-Stack Developer', 'location': 'New York', 'type': 'Full-time', 'salary': 'Competitive',
     'description': 'Build web applications with modern JavaScript frameworks, Python services and relational databases.',
     'active': True},
    {'title': 'Digital Marketing Specialist', 'location': 'Hybrid', 'type': 'Full-time', 'salary': 'Competitive',
     'description': 'Plan and run digital marketing strategies for our clients across SEO, PPC and content.',
     'active': True},
]

BLOG_ARTICLES = [
    {'title': '10 UX Design Trends to Watch', 'category': 'Design',
     'excerpt': 'The UX design trends shaping the digital landscape and how to use them in your projects.',
     'content': '<p>UX design keeps evolving.</p><h2>1. Dark Mode</h2><p>Reduced eye strain and a modern look.</p>'
                '<h2>2. Microinteractions</h2><p>Small animations that give feedback and guide the user.</p>',
     'image_url': 'https://images.unsplash.com/photo-1515378791036-0648a3ef77b2?w=600&auto=format&fit=crop',
     'author_name': 'Sarah Johnson', 'author_image_url': 'https://randomuser.me/api/portraits/women/44.jpg',
     'published': True},
    {'title': 'Building Performance-First Web Applications', 'category': 'Development',
     'excerpt': 'How to optimize web applications for speed and a better user experience.',
     'content': '<p>Performance decides whether users stay.</p><h2>Optimize Images and Media</h2>'
                '<p>Use modern formats, responsive images and lazy loading.</p>',
     'image_url': 'https://images.unsplash.com/photo-1432888498266-38ffec3eaf0a?w=600&auto=format&fit=crop',
     'author_name': 'David Chen', 'author_image_url': 'https://randomuser.me/api/portraits/men/32.jpg',
     'published': True},
    {'title': 'The Future of Content Marketing Strategy', 'category': 'Marketing',
     'excerpt': 'Where content marketing is heading and how your brand can stand out.',
     'content': '<p>Content marketing has changed a lot over the last decade.</p>'
                '<h2>Personalized Content</h2><p>Content that adapts to each reader in real time.</p>',
     'image_url': 'https://images.unsplash.com/photo-1520333789090-1afc82db536a?w=600&auto=format&fit=crop',
     'author_name': 'Emily Rodriguez', 'author_image_url': 'https://randomuser.me/api/portraits/women/68.jpg',
     'published': True},
]


def seed_initial_data(storage, admin_username, admin_password, password_method='pbkdf2:sha256'):
    """Insert fixtures into empty tables. Returns the number of rows added."""
    added = 0

    if storage.users.get_by_username(admin_username) is None:
        storage.users.create_admin(admin_username, generate_password_hash(admin_password, method=password_method))
        logger.info('Seeded admin user %s', admin_username)
        added += 1

    groups = [
        (storage.projects, PROJECTS),
        (storage.services, SERVICES),
        (storage.products, PRODUCTS),
        (storage.jobs, JOB_OPENINGS),
        (storage.articles, BLOG_ARTICLES),
    ]
    for repo, rows in groups:
        if repo.count():
            continue
        for row in rows:
            repo.create(**row)
        logger.info('Seeded %d %s rows', len(rows), repo.model.__tablename__)
        added += len(rows)

    return added
