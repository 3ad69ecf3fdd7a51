from rest_framework import serializers
from .models import StoreSetting, parse_setting_value


class StoreSettingSerializer(serializers.ModelSerializer):
    typed_value = serializers.SerializerMethodField()

    class Meta:
        model = StoreSetting
        fields = ["id", "key", "value", "type", "description", "typed_value", "updated_at"]
        read_only_fields = ["id", "updated_at"]
        extra_kwargs = {
            # Upserts address existing keys, so uniqueness is not a validation error here.
            "key": {"validators": []},
            "type": {"required": False},
            "value": {"allow_blank": True},
        }

    def get_typed_value(self, obj):
        try:
            value = obj.typed_value()
        except ValueError:
            return None
        if obj.type == StoreSetting.ValueType.NUMBER:
            return str(value)
        return value

    def validate_key(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value

    def validate(self, attrs):
        value_type = attrs.get("type") or getattr(self.instance, "type", None) or StoreSetting.ValueType.STRING
        if "value" in attrs:
            try:
                parse_setting_value(attrs["value"], value_type)
            except ValueError as e:
                raise serializers.ValidationError({"value": str(e)})
        return attrs
