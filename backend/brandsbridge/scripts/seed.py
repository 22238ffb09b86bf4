"""
Seed-скрипт: начальные данные сайта (админ, каталог, контент, настройки).
Повторный запуск безопасен: записи ищутся по натуральному ключу и обновляются.
Запуск: python -m brandsbridge.scripts.seed
"""
from typing import Any, Dict, List, Type
from sqlmodel import SQLModel, Session, select
from brandsbridge.core.config import settings
from brandsbridge.core.logging import setup_logging, get_logger
from brandsbridge.core.security import hash_password
from brandsbridge.db.session import engine, create_db_and_tables
from brandsbridge.models import (
    User, UserRole, Category, Brand, Product,
    Content, ContentType, Statistic, CompanyValue, Service, Setting,
)
from brandsbridge.models.base import utcnow

logger = get_logger(__name__)


CATEGORIES = [
    {"name": "Confectionery", "name_ar": "الحلويات", "slug": "confectionery", "description": "Chocolates, candies, and sweet treats from world-renowned brands", "icon": "candy", "sort_order": 1},
    {"name": "Beverages", "name_ar": "المشروبات", "slug": "beverages", "description": "Soft drinks, juices, energy drinks, and premium water brands", "icon": "cup-soda", "sort_order": 2},
    {"name": "Coffee & Tea", "name_ar": "القهوة والشاي", "slug": "coffee-tea", "description": "Premium coffee beans, instant coffee, and fine teas", "icon": "coffee", "sort_order": 3},
    {"name": "Groceries", "name_ar": "البقالة", "slug": "groceries", "description": "Snacks, cereals, pasta, sauces, and everyday food items", "icon": "shopping-basket", "sort_order": 4},
    {"name": "Household", "name_ar": "المنزلية", "slug": "household", "description": "Cleaning products, personal care, and household essentials", "icon": "home", "sort_order": 5},
    {"name": "Pet Food", "name_ar": "طعام الحيوانات", "slug": "pet-food", "description": "Quality nutrition for cats, dogs, and other pets", "icon": "paw-print", "sort_order": 6},
]

BRANDS = [
    {"name": "Nestlé", "slug": "nestle", "description": "Global leader in nutrition, health and wellness", "country": "Switzerland", "is_featured": True, "sort_order": 1},
    {"name": "Mars", "slug": "mars", "description": "World-famous for chocolate bars and confectionery", "country": "USA", "is_featured": True, "sort_order": 2},
    {"name": "Mondelez", "slug": "mondelez", "description": "Home to iconic snack brands worldwide", "country": "USA", "is_featured": True, "sort_order": 3},
    {"name": "Ferrero", "slug": "ferrero", "description": "Italian excellence in premium confectionery", "country": "Italy", "is_featured": True, "sort_order": 4},
    {"name": "Lindt", "slug": "lindt", "description": "Swiss master chocolatiers since 1845", "country": "Switzerland", "is_featured": True, "sort_order": 5},
    {"name": "Coca-Cola", "slug": "coca-cola", "description": "The world's most recognized beverage brand", "country": "USA", "is_featured": True, "sort_order": 6},
    {"name": "PepsiCo", "slug": "pepsico", "description": "Global food and beverage leader", "country": "USA", "is_featured": True, "sort_order": 7},
    {"name": "Red Bull", "slug": "red-bull", "description": "Leading energy drink manufacturer", "country": "Austria", "is_featured": True, "sort_order": 8},
    {"name": "Lavazza", "slug": "lavazza", "description": "Italian coffee tradition since 1895", "country": "Italy", "is_featured": True, "sort_order": 9},
    {"name": "Starbucks", "slug": "starbucks", "description": "Premium coffee experience worldwide", "country": "USA", "is_featured": True, "sort_order": 10},
    {"name": "Procter & Gamble", "slug": "pg", "description": "Trusted household and personal care products", "country": "USA", "is_featured": True, "sort_order": 11},
    {"name": "Unilever", "slug": "unilever", "description": "Sustainable living brands", "country": "UK/Netherlands", "is_featured": True, "sort_order": 12},
    {"name": "Purina", "slug": "purina", "description": "Science-based pet nutrition", "country": "USA", "is_featured": False, "sort_order": 13},
    {"name": "Royal Canin", "slug": "royal-canin", "description": "Precise nutrition for cats and dogs", "country": "France", "is_featured": False, "sort_order": 14},
]

# category/brand указаны по slug, id подставляются при сидировании
PRODUCTS = [
    {"name": "Kit Kat", "slug": "kit-kat", "description": "Crispy wafer fingers covered in smooth milk chocolate", "sku": "NEST-001", "category": "confectionery", "brand": "nestle", "is_featured": True, "sort_order": 1},
    {"name": "After Eight", "slug": "after-eight", "description": "Elegant mint chocolate thins", "sku": "NEST-002", "category": "confectionery", "brand": "nestle", "is_featured": True, "sort_order": 2},
    {"name": "Quality Street", "slug": "quality-street", "description": "Assorted chocolates and toffees", "sku": "NEST-003", "category": "confectionery", "brand": "nestle", "is_featured": False, "sort_order": 3},
    {"name": "Coca-Cola Classic", "slug": "coca-cola-classic", "description": "The original refreshing cola taste", "sku": "COKE-001", "category": "beverages", "brand": "coca-cola", "is_featured": True, "sort_order": 4},
    {"name": "Fanta Orange", "slug": "fanta-orange", "description": "Vibrant orange flavored soft drink", "sku": "COKE-002", "category": "beverages", "brand": "coca-cola", "is_featured": True, "sort_order": 5},
    {"name": "Sprite", "slug": "sprite", "description": "Crisp lemon-lime refreshment", "sku": "COKE-003", "category": "beverages", "brand": "coca-cola", "is_featured": False, "sort_order": 6},
]

CONTENTS = [
    {"key": "hero_title", "type": ContentType.TEXT, "value": "Your Gateway to Global Brands", "value_ar": "بوابتك للعلامات التجارية العالمية", "section": "hero"},
    {"key": "hero_subtitle", "type": ContentType.TEXT, "value": "Premium FMCG Distribution Across Continents", "value_ar": "توزيع السلع الاستهلاكية عالية الجودة عبر القارات", "section": "hero"},
    {"key": "hero_cta", "type": ContentType.TEXT, "value": "Explore Our Products", "value_ar": "استكشف منتجاتنا", "section": "hero"},
    {"key": "about_title", "type": ContentType.TEXT, "value": "About Brands Bridge International", "value_ar": "حول براندز بريدج الدولية", "section": "about"},
    {"key": "about_text", "type": ContentType.HTML, "value": "<p>Brands Bridge International is a leading FMCG trading company specializing in the import, export, and distribution of premium consumer goods.</p><p>Our expertise in logistics, regulatory compliance, and market understanding makes us the preferred partner for brands looking to expand their global footprint.</p>", "value_ar": "<p>براندز بريدج الدولية هي شركة رائدة في تجارة السلع الاستهلاكية سريعة الدوران.</p>", "section": "about"},
    {"key": "contact_title", "type": ContentType.TEXT, "value": "Get in Touch", "value_ar": "تواصل معنا", "section": "contact"},
    {"key": "contact_subtitle", "type": ContentType.TEXT, "value": "Ready to partner with us? We'd love to hear from you.", "value_ar": "مستعد للشراكة معنا؟ نحب أن نسمع منك.", "section": "contact"},
]

STATISTICS = [
    {"key": "countries", "label": "Countries Served", "label_ar": "الدول التي نخدمها", "value": "75+", "icon": "globe", "sort_order": 1},
    {"key": "products", "label": "Products Available", "label_ar": "المنتجات المتوفرة", "value": "15,000+", "icon": "package", "sort_order": 2},
    {"key": "brands", "label": "Partner Brands", "label_ar": "العلامات التجارية الشريكة", "value": "200+", "icon": "award", "sort_order": 3},
    {"key": "experience", "label": "Years Experience", "label_ar": "سنوات الخبرة", "value": "15+", "icon": "calendar", "sort_order": 4},
]

VALUES = [
    {"title": "Expertise", "title_ar": "الخبرة", "description": "Deep industry knowledge and market understanding built over years of successful partnerships.", "icon": "lightbulb", "sort_order": 1},
    {"title": "Transparency", "title_ar": "الشفافية", "description": "Open communication and honest dealings form the foundation of all our business relationships.", "icon": "eye", "sort_order": 2},
    {"title": "Collaboration", "title_ar": "التعاون", "description": "We believe in building lasting partnerships that create mutual value and growth.", "icon": "users", "sort_order": 3},
    {"title": "Commitment", "title_ar": "الالتزام", "description": "Dedicated to delivering excellence in every aspect of our service and operations.", "icon": "target", "sort_order": 4},
]

SERVICES = [
    {"title": "Import & Export", "title_ar": "الاستيراد والتصدير", "description": "Comprehensive international trade services connecting suppliers with markets worldwide.", "icon": "ship", "sort_order": 1},
    {"title": "Distribution", "title_ar": "التوزيع", "description": "Efficient logistics and distribution networks ensuring timely delivery across regions.", "icon": "truck", "sort_order": 2},
    {"title": "Warehousing", "title_ar": "التخزين", "description": "Modern storage facilities with climate control and inventory management systems.", "icon": "warehouse", "sort_order": 3},
    {"title": "Custom Labeling", "title_ar": "التغليف المخصص", "description": "Professional labeling and packaging services to meet regional requirements.", "icon": "tag", "sort_order": 4},
]

SETTINGS = [
    {"key": "company_name", "value": "Brands Bridge International", "group": "general"},
    {"key": "company_email", "value": "info@brandsbridgeintl.com", "group": "contact"},
    {"key": "company_phone", "value": "+1 (555) 123-4567", "group": "contact"},
    {"key": "company_address", "value": "123 Trade Center, Business District, Dubai, UAE", "group": "contact"},
    {"key": "social_linkedin", "value": "https://linkedin.com/company/brands-bridge-international", "group": "social"},
    {"key": "social_facebook", "value": "https://facebook.com/brandsbridgeintl", "group": "social"},
    {"key": "social_instagram", "value": "https://instagram.com/brandsbridgeintl", "group": "social"},
    {"key": "meta_title", "value": "Brands Bridge International | Premium FMCG Trading", "group": "seo"},
    {"key": "meta_description", "value": "Brands Bridge International - Your trusted partner in global FMCG distribution.", "group": "seo"},
]


def upsert(session: Session, model: Type[SQLModel], key: str, values: Dict[str, Any]) -> SQLModel:
    """Создаёт запись или обновляет найденную по натуральному ключу"""
    existing = session.exec(select(model).where(getattr(model, key) == values[key])).first()
    if existing:
        for field, value in values.items():
            setattr(existing, field, value)
        if hasattr(existing, "updated_at"):
            existing.updated_at = utcnow()
        session.add(existing)
        return existing

    obj = model(**values)
    session.add(obj)
    return obj


def seed_rows(session: Session, model: Type[SQLModel], key: str, rows: List[Dict[str, Any]]) -> None:
    for values in rows:
        upsert(session, model, key, values)
    session.commit()
    logger.info("Seeded", table=model.__tablename__, count=len(rows))


def seed_admin(session: Session) -> None:
    """Создание админа если не существует"""
    if not settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_PASSWORD not set, skipping admin seed")
        return

    existing = session.exec(select(User).where(User.email == settings.ADMIN_EMAIL)).first()
    if existing:
        logger.info("Admin already exists", email=existing.email)
        return

    admin = User(
        email=settings.ADMIN_EMAIL,
        password_hash=hash_password(settings.ADMIN_PASSWORD),
        first_name="Admin",
        last_name="User",
        role=UserRole.SUPER_ADMIN,
        is_active=True,
    )
    session.add(admin)
    session.commit()
    logger.info("Admin created", email=admin.email)


def seed_products(session: Session) -> None:
    categories = {c.slug: c.id for c in session.exec(select(Category)).all()}
    brands = {b.slug: b.id for b in session.exec(select(Brand)).all()}

    rows = []
    for product in PRODUCTS:
        values = {k: v for k, v in product.items() if k not in ("category", "brand")}
        values["category_id"] = categories.get(product["category"])
        values["brand_id"] = brands.get(product["brand"])
        rows.append(values)

    seed_rows(session, Product, "slug", rows)


def seed(session: Session) -> None:
    seed_admin(session)
    seed_rows(session, Category, "slug", CATEGORIES)
    seed_rows(session, Brand, "slug", BRANDS)
    seed_products(session)
    seed_rows(session, Content, "key", CONTENTS)
    seed_rows(session, Statistic, "key", STATISTICS)
    seed_rows(session, CompanyValue, "title", VALUES)
    seed_rows(session, Service, "title", SERVICES)
    seed_rows(session, Setting, "key", SETTINGS)


def main():
    setup_logging(log_level=settings.LOG_LEVEL, json_format=settings.is_production)
    logger.info("Creating tables")
    create_db_and_tables()
    with Session(engine) as session:
        seed(session)
    logger.info("Seed completed")


if __name__ == "__main__":
    main()
