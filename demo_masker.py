from humanizer.masker import PIIMasker

# Create masker instance
masker = PIIMasker()

# Test cases with realistic scenarios
test_cases = [
    {
        "name": "Meeting follow-up",
        "text": "Contact John Smith at john@example.com or 555-123-4567 about the project."
    },
    {
        "name": "Customer service inquiry",
        "text": "Please send the invoice to billing@company.com. My phone number is (555) 987-6543."
    },
    {
        "name": "Sentence starters",
        "text": "The Quick Brown reviewed it. When Maria Lopez called, nobody answered."
    },
    {
        "name": "Multiple emails",
        "text": "CC both alice@example.com and bob@company.org on all correspondence."
    },
    {
        "name": "No PII",
        "text": "this is a simple message with no personal information at all."
    },
    {
        "name": "Mixed format phone",
        "text": "Call me at +1 555.123.4567 or 555 987 6543"
    }
]

print("=" * 80)
print("PII MASKING DEMO")
print("=" * 80)

for i, test_case in enumerate(test_cases, 1):
    print(f"\n{'=' * 80}")
    print(f"Test Case {i}: {test_case['name']}")
    print(f"{'=' * 80}")
    print(f"\nOriginal Text:")
    print(f"  {test_case['text']}")

    masked_text = masker.mask(test_case['text'])

    print(f"\nMasked Text:")
    print(f"  {masked_text}")

    if masker.size:
        print(f"\nMappings ({masker.size} found):")
        for token, original in masker.mappings.items():
            print(f"  {token} → {original}")
    else:
        print(f"\nNo PII detected")

    assert masker.unmask(masked_text) == test_case['text']

print(f"\n{'=' * 80}")
print("Demo completed successfully!")
print(f"{'=' * 80}")
