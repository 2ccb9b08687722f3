"""In-memory sample of CGWB-style groundwater assessment units."""

from ingres_bot.services.dataset.models import AssessmentCategory, GroundwaterRecord

_SAFE = AssessmentCategory.SAFE
_SEMI = AssessmentCategory.SEMI_CRITICAL
_CRIT = AssessmentCategory.CRITICAL
_OE = AssessmentCategory.OVER_EXPLOITED

# state, district, block, category, stage %, recharge, extraction, year
_ROWS = (
    ("Punjab", "Amritsar", "Ajnala", _OE, 156.8, 89.2, 178.5, 2023),
    ("Punjab", "Amritsar", "Amritsar-I", _OE, 145.2, 82.1, 165.8, 2023),
    ("Punjab", "Ludhiana", "Ludhiana-I", _OE, 198.7, 112.3, 225.4, 2023),
    ("Punjab", "Ludhiana", "Ludhiana-II", _CRIT, 134.5, 98.7, 142.1, 2023),
    ("Punjab", "Bathinda", "Bathinda", _OE, 167.9, 95.4, 189.2, 2023),
    ("Haryana", "Kurukshetra", "Kurukshetra", _SEMI, 89.4, 67.8, 95.2, 2023),
    ("Haryana", "Karnal", "Karnal", _SAFE, 78.5, 89.4, 67.8, 2023),
    ("Haryana", "Hisar", "Hisar-I", _CRIT, 145.7, 89.2, 156.8, 2023),
    ("Haryana", "Sirsa", "Sirsa", _OE, 178.9, 98.7, 198.4, 2023),
    ("Rajasthan", "Jaipur", "Jaipur-I", _SAFE, 67.8, 78.9, 56.7, 2023),
    ("Rajasthan", "Jaipur", "Jaipur-II", _SAFE, 72.4, 82.1, 61.3, 2023),
    ("Rajasthan", "Jodhpur", "Jodhpur", _SEMI, 89.7, 67.4, 98.2, 2023),
    ("Rajasthan", "Bikaner", "Bikaner", _SAFE, 45.6, 56.8, 34.2, 2023),
    ("Rajasthan", "Alwar", "Alwar", _CRIT, 134.8, 89.7, 145.6, 2023),
    ("Gujarat", "Ahmedabad", "Ahmedabad City", _CRIT, 156.7, 112.4, 167.8, 2023),
    ("Gujarat", "Surat", "Surat", _SEMI, 98.4, 78.9, 105.6, 2023),
    ("Gujarat", "Vadodara", "Vadodara", _SAFE, 78.9, 89.4, 67.2, 2023),
    ("Gujarat", "Rajkot", "Rajkot", _SEMI, 89.7, 67.8, 98.4, 2023),
    ("Maharashtra", "Pune", "Pune City", _CRIT, 145.6, 98.7, 156.8, 2023),
    ("Maharashtra", "Mumbai Suburban", "Andheri", _SAFE, 56.7, 67.8, 45.6, 2023),
    ("Maharashtra", "Nashik", "Nashik", _SEMI, 89.4, 78.9, 95.7, 2023),
    ("Maharashtra", "Aurangabad", "Aurangabad", _CRIT, 134.7, 89.2, 145.8, 2023),
    ("Tamil Nadu", "Chennai", "Chennai", _CRIT, 167.8, 112.4, 178.9, 2023),
    ("Tamil Nadu", "Coimbatore", "Coimbatore", _SEMI, 98.7, 78.4, 105.8, 2023),
    ("Tamil Nadu", "Madurai", "Madurai", _SAFE, 67.8, 78.9, 56.4, 2023),
    ("Tamil Nadu", "Salem", "Salem", _SEMI, 89.7, 67.2, 98.5, 2023),
    ("Karnataka", "Bangalore Urban", "Bangalore North", _CRIT, 156.8, 112.7, 167.9, 2023),
    ("Karnataka", "Bangalore Urban", "Bangalore South", _CRIT, 145.7, 98.4, 156.2, 2023),
    ("Karnataka", "Mysore", "Mysore", _SAFE, 78.4, 89.7, 67.8, 2023),
    ("Karnataka", "Hubli", "Hubli", _SEMI, 89.2, 67.8, 95.4, 2023),
    ("Uttar Pradesh", "Lucknow", "Lucknow", _SEMI, 98.7, 78.9, 105.6, 2023),
    ("Uttar Pradesh", "Kanpur Nagar", "Kanpur", _CRIT, 134.8, 89.4, 145.7, 2023),
    ("Uttar Pradesh", "Agra", "Agra", _SEMI, 89.7, 67.8, 98.2, 2023),
    ("Uttar Pradesh", "Varanasi", "Varanasi", _SAFE, 67.4, 78.2, 56.8, 2023),
    ("West Bengal", "Kolkata", "Kolkata", _SAFE, 56.8, 67.4, 45.2, 2023),
    ("West Bengal", "Howrah", "Howrah", _SAFE, 67.2, 78.4, 56.7, 2023),
    ("West Bengal", "North 24 Parganas", "Barasat", _SAFE, 78.4, 89.2, 67.8, 2023),
    ("Andhra Pradesh", "Visakhapatnam", "Visakhapatnam", _SAFE, 78.9, 89.4, 67.2, 2023),
    ("Andhra Pradesh", "Vijayawada", "Vijayawada", _SEMI, 89.7, 67.8, 98.4, 2023),
    ("Andhra Pradesh", "Guntur", "Guntur", _CRIT, 134.5, 89.7, 145.2, 2023),
    ("Punjab", "Amritsar", "Ajnala", _OE, 152.4, 87.8, 174.2, 2022),
    ("Punjab", "Ludhiana", "Ludhiana-I", _OE, 194.3, 108.9, 221.7, 2022),
    ("Haryana", "Karnal", "Karnal", _SAFE, 76.2, 87.1, 65.4, 2022),
    ("Rajasthan", "Jaipur", "Jaipur-I", _SAFE, 65.4, 76.5, 54.3, 2022),
    ("Gujarat", "Ahmedabad", "Ahmedabad City", _CRIT, 152.3, 108.7, 163.4, 2022),
    ("Punjab", "Amritsar", "Ajnala", _OE, 148.7, 85.4, 169.8, 2021),
    ("Punjab", "Ludhiana", "Ludhiana-I", _OE, 189.6, 105.2, 217.3, 2021),
    ("Haryana", "Karnal", "Karnal", _SAFE, 74.8, 84.7, 63.2, 2021),
    ("Rajasthan", "Jaipur", "Jaipur-I", _SAFE, 63.2, 74.1, 52.7, 2021),
    ("Arunachal Pradesh", "Papum Pare", "Itanagar", _SAFE, 45.6, 34.2, 56.8, 2023),
    ("Arunachal Pradesh", "West Kameng", "Bomdila", _SAFE, 42.3, 31.8, 53.7, 2023),
    ("Assam", "Kamrup", "Guwahati", _SEMI, 78.9, 89.2, 67.4, 2023),
    ("Assam", "Jorhat", "Jorhat", _SAFE, 67.8, 56.4, 78.9, 2023),
    ("Bihar", "Patna", "Patna", _CRIT, 134.5, 145.6, 123.4, 2023),
    ("Bihar", "Gaya", "Gaya", _SEMI, 89.7, 98.4, 78.9, 2023),
    ("Chhattisgarh", "Raipur", "Raipur", _SAFE, 67.8, 56.7, 78.9, 2023),
    ("Chhattisgarh", "Bilaspur", "Bilaspur", _SEMI, 89.4, 78.9, 95.7, 2023),
    ("Goa", "North Goa", "Panaji", _SAFE, 45.6, 34.2, 56.8, 2023),
    ("Goa", "South Goa", "Margao", _SAFE, 42.3, 31.8, 53.7, 2023),
    ("Himachal Pradesh", "Shimla", "Shimla", _SAFE, 56.7, 45.6, 67.8, 2023),
    ("Himachal Pradesh", "Kangra", "Dharamshala", _SEMI, 78.9, 89.4, 67.2, 2023),
    ("Jharkhand", "Ranchi", "Ranchi", _CRIT, 145.6, 156.7, 134.5, 2023),
    ("Jharkhand", "Jamshedpur", "Jamshedpur", _SEMI, 98.7, 89.4, 105.6, 2023),
    ("Kerala", "Thiruvananthapuram", "Thiruvananthapuram", _SAFE, 67.8, 56.4, 78.9, 2023),
    ("Kerala", "Kochi", "Kochi", _SEMI, 89.7, 78.9, 95.4, 2023),
    ("Madhya Pradesh", "Bhopal", "Bhopal", _CRIT, 156.7, 167.8, 145.6, 2023),
    ("Madhya Pradesh", "Indore", "Indore", _SEMI, 98.4, 89.7, 105.6, 2023),
    ("Manipur", "Imphal West", "Imphal", _SAFE, 45.6, 34.2, 56.8, 2023),
    ("Manipur", "Imphal East", "Imphal", _SAFE, 42.3, 31.8, 53.7, 2023),
    ("Meghalaya", "East Khasi Hills", "Shillong", _SAFE, 56.7, 45.6, 67.8, 2023),
    ("Meghalaya", "West Garo Hills", "Tura", _SEMI, 78.9, 89.4, 67.2, 2023),
    ("Mizoram", "Aizawl", "Aizawl", _SAFE, 45.6, 34.2, 56.8, 2023),
    ("Mizoram", "Lunglei", "Lunglei", _SAFE, 42.3, 31.8, 53.7, 2023),
    ("Nagaland", "Kohima", "Kohima", _SAFE, 56.7, 45.6, 67.8, 2023),
    ("Nagaland", "Dimapur", "Dimapur", _SEMI, 78.9, 89.4, 67.2, 2023),
    ("Odisha", "Khordha", "Bhubaneswar", _SAFE, 67.8, 56.4, 78.9, 2023),
    ("Odisha", "Cuttack", "Cuttack", _SEMI, 89.7, 78.9, 95.4, 2023),
    ("Sikkim", "East Sikkim", "Gangtok", _SAFE, 45.6, 34.2, 56.8, 2023),
    ("Sikkim", "West Sikkim", "Geyzing", _SAFE, 42.3, 31.8, 53.7, 2023),
    ("Telangana", "Hyderabad", "Hyderabad", _CRIT, 156.7, 167.8, 145.6, 2023),
    ("Telangana", "Warangal", "Warangal", _SEMI, 98.4, 89.7, 105.6, 2023),
    ("Tripura", "West Tripura", "Agartala", _SAFE, 56.7, 45.6, 67.8, 2023),
    ("Tripura", "South Tripura", "Udaipur", _SEMI, 78.9, 89.4, 67.2, 2023),
    ("Uttarakhand", "Dehradun", "Dehradun", _SAFE, 67.8, 56.4, 78.9, 2023),
    ("Uttarakhand", "Haridwar", "Haridwar", _SEMI, 89.7, 78.9, 95.4, 2023),
)

SAMPLE_RECORDS: tuple[GroundwaterRecord, ...] = tuple(GroundwaterRecord(*row) for row in _ROWS)
